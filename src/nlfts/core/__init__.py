"""Core components for nlfts."""

from nlfts.core.config import NLFTSConfig
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

__all__ = [
    "DatabaseConnection",
    "SQLiteStore",
    "NLFTSConfig",
    "ColumnType",
    "ColumnSchema",
    "TableSchema",
    "Catalog",
    "QueryPlan",
    "QueryReport",
]
