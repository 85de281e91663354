"""nlfts - Natural-language search over SQLite FTS5 mirror tables.

Infers a typed schema for every table that has a ``<table>_fts`` mirror and
translates free-text requests into FTS5 queries with filters, ordering and
limits.

Example:
    from nlfts import QueryTranslator, SQLiteStore, ask, build_catalog

    store = SQLiteStore.from_url("sqlite:///library.db")
    catalog = build_catalog(store)

    translator = QueryTranslator(catalog)
    sql = translator.translate('find books "the great gatsby" published after 1950')
    # SELECT rowid, * FROM books_fts WHERE books_fts MATCH '...'
    #     AND published_at >= '1950-01-01'

    # Or translate and run in one go
    report = ask(store, "show top 3 latest orders")
"""

from nlfts.core.config import NLFTSConfig, get_database_url
from nlfts.core.connection import DatabaseConnection
from nlfts.core.store import SQLiteStore
from nlfts.core.types import (
    Catalog,
    ColumnSchema,
    ColumnType,
    QueryPlan,
    QueryReport,
    TableSchema,
)
from nlfts.exceptions import (
    ConnectionError,
    NLFTSError,
    QueryError,
    TableNotFoundError,
)
from nlfts.query import NOT_UNDERSTOOD, QueryExecutor, QueryTranslator, ask, translate
from nlfts.schema import CatalogBuilder, ColumnTypeInferrer, build_catalog, infer_column_type

__version__ = "0.1.0"

__all__ = [
    # Store access
    "DatabaseConnection",
    "SQLiteStore",
    "NLFTSConfig",
    "get_database_url",
    # Types
    "ColumnType",
    "ColumnSchema",
    "TableSchema",
    "Catalog",
    "QueryPlan",
    "QueryReport",
    # Schema inference
    "infer_column_type",
    "ColumnTypeInferrer",
    "CatalogBuilder",
    "build_catalog",
    # Translation and execution
    "QueryTranslator",
    "QueryExecutor",
    "translate",
    "ask",
    "NOT_UNDERSTOOD",
    # Exceptions
    "NLFTSError",
    "ConnectionError",
    "QueryError",
    "TableNotFoundError",
]
