"""Execution of translated queries and result reporting."""

from __future__ import annotations

import logging
from typing import Any

from nlfts.core.config import NLFTSConfig
from nlfts.core.store import SQLiteStore
from nlfts.core.types import Catalog, QueryReport
from nlfts.query.translator import QueryTranslator
from nlfts.schema.catalog import build_catalog

logger = logging.getLogger(__name__)

NOT_UNDERSTOOD = "Could not interpret query"


def not_understood() -> dict[str, Any]:
    """Structured result for a request that names no known table."""
    return {"error": NOT_UNDERSTOOD}


class QueryExecutor:
    """Runs rendered SQL against the store and builds a :class:`QueryReport`."""

    def __init__(self, store: SQLiteStore) -> None:
        self._store = store

    def execute(self, query: str, sql: str) -> QueryReport:
        """Execute ``sql`` and report its rows as column-to-value mappings.

        Args:
            query: The original free-text request
            sql: SQL rendered from it

        Raises:
            QueryError: If the store rejects the SQL
        """
        columns, rows = self._store.execute(sql)
        records = [dict(zip(columns, row, strict=True)) for row in rows]
        logger.info(f"{len(records)} row(s) for {query!r}")
        return QueryReport(query=query, sql=sql, count=len(records), rows=records)


def ask(
    store: SQLiteStore,
    query: str,
    config: NLFTSConfig | None = None,
    catalog: Catalog | None = None,
) -> QueryReport | None:
    """Translate and execute a free-text request in one call.

    The catalog is built fresh from the store unless one is passed in.

    Returns:
        QueryReport, or None when the request cannot be interpreted
    """
    config = config or NLFTSConfig()
    if catalog is None:
        catalog = build_catalog(store, config)

    sql = QueryTranslator(catalog, config).translate(query)
    if sql is None:
        return None
    return QueryExecutor(store).execute(query, sql)
