"""Read-only store access for catalog discovery and query execution."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from nlfts.core.connection import DatabaseConnection
from nlfts.exceptions import QueryError, TableNotFoundError

logger = logging.getLogger(__name__)


class SQLiteStore:
    """Thin read-only layer over a SQLite database with FTS5 mirror tables.

    Every method issues only SELECT or PRAGMA reads.
    """

    def __init__(self, connection: DatabaseConnection) -> None:
        self._connection = connection

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> SQLiteStore:
        """Create a store over a fresh connection."""
        return cls(DatabaseConnection(url, echo=echo))

    def _quote(self, identifier: str) -> str:
        return self._connection.engine.dialect.identifier_preparer.quote(identifier)

    def list_mirror_tables(self, suffix: str) -> list[str]:
        """List tables whose name ends with ``suffix``, in sqlite_master order.

        Args:
            suffix: Mirror naming suffix, e.g. "_fts"

        Returns:
            Mirror table names (FTS5 shadow tables are excluded by the suffix)
        """
        escaped = suffix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        query = text(
            "SELECT name FROM sqlite_master "
            "WHERE type = 'table' AND name LIKE :pattern ESCAPE '\\'"
        )
        try:
            with self._connection.engine.connect() as conn:
                result = conn.execute(query, {"pattern": f"%{escaped}"})
                names = [row[0] for row in result]
        except SQLAlchemyError as e:
            raise QueryError(f"Failed to list mirror tables: {e}", sql=str(query)) from e
        # LIKE is case-insensitive in SQLite; the suffix is not
        return [name for name in names if name.endswith(suffix)]

    def list_columns(self, table: str) -> list[str]:
        """List a table's column names in declaration order.

        Raises:
            TableNotFoundError: If the table does not exist or has no columns
        """
        sql = f"PRAGMA table_info({self._quote(table)})"
        try:
            with self._connection.engine.connect() as conn:
                result = conn.exec_driver_sql(sql)
                # PRAGMA table_info rows: cid, name, type, notnull, dflt_value, pk
                columns = [row[1] for row in result]
        except SQLAlchemyError as e:
            raise QueryError(f"Failed to list columns of '{table}': {e}", sql=sql) from e
        if not columns:
            raise TableNotFoundError(table)
        return columns

    def sample_values(self, table: str, column: str, limit: int = 10) -> list[str]:
        """Fetch up to ``limit`` non-null values of a column as text."""
        quoted_column = self._quote(column)
        sql = (
            f"SELECT {quoted_column} FROM {self._quote(table)} "
            f"WHERE {quoted_column} IS NOT NULL LIMIT ?"
        )
        try:
            with self._connection.engine.connect() as conn:
                result = conn.exec_driver_sql(sql, (limit,))
                return [str(row[0]) for row in result]
        except SQLAlchemyError as e:
            raise QueryError(f"Failed to sample '{table}.{column}': {e}", sql=sql) from e

    def execute(self, sql: str) -> tuple[list[str], list[tuple[Any, ...]]]:
        """Run a read query and return its column names and rows.

        The SQL is passed to the driver as-is, so colons inside FTS5 match
        literals are not mistaken for bind parameters.

        Raises:
            QueryError: If the store rejects the query
        """
        logger.debug(f"Executing: {sql}")
        try:
            with self._connection.engine.connect() as conn:
                result = conn.exec_driver_sql(sql)
                columns = list(result.keys())
                rows = [tuple(row) for row in result]
        except SQLAlchemyError as e:
            reason = getattr(e, "orig", None) or e
            raise QueryError(f"Query execution failed: {reason}", sql=sql) from e
        return columns, rows

    def close(self) -> None:
        self._connection.close()
