"""Custom exceptions for nlfts.

Errors carry a human-readable message plus a JSON-serializable context so the
CLI can report them in the same structured shape as successful results.
"""

from __future__ import annotations

from typing import Any


class NLFTSError(Exception):
    """Base exception for all nlfts errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ConnectionError(NLFTSError):
    """Failed to connect to the database."""

    pass


class TableNotFoundError(NLFTSError):
    """Base table behind a mirror table does not exist or has no columns."""

    def __init__(self, table_name: str, mirror_name: str | None = None) -> None:
        if mirror_name:
            message = (
                f"Table '{table_name}' referenced by mirror '{mirror_name}' "
                "does not exist or has no columns."
            )
        else:
            message = f"Table '{table_name}' does not exist or has no columns."
        super().__init__(message, {"table_name": table_name, "mirror_name": mirror_name})
        self.table_name = table_name
        self.mirror_name = mirror_name


class QueryError(NLFTSError):
    """Query execution failed."""

    def __init__(self, message: str, sql: str | None = None) -> None:
        super().__init__(message, {"sql": sql} if sql else None)
        self.sql = sql
