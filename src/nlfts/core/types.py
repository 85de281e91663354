"""Core types for nlfts.

All types are pydantic models so they serialize straight to JSON for the CLI.
Schemas and plans are frozen: a catalog snapshot never changes once built.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ColumnType(StrEnum):
    """Semantic type inferred from a column's sample values."""

    INTEGER = "integer"
    FLOAT = "float"
    TIMESTAMP = "timestamp"
    TEXT = "text"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid column type values."""
        return [t.value for t in cls]


class ColumnSchema(BaseModel):
    """A base-table column and its inferred type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ColumnType = ColumnType.TEXT


class TableSchema(BaseModel):
    """Typed schema of a base table that has a full-text mirror.

    ``name`` is the base table, never the mirror. The mirror name is derived
    with :meth:`mirror_name`.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    columns: tuple[ColumnSchema, ...] = ()

    def mirror_name(self, suffix: str = "_fts") -> str:
        """Name of the full-text mirror table for this base table."""
        return f"{self.name}{suffix}"

    def first_column_of(self, *types: ColumnType) -> ColumnSchema | None:
        """Return the first column, in schema order, whose type is one of ``types``."""
        for column in self.columns:
            if column.type in types:
                return column
        return None

    def column(self, name: str) -> ColumnSchema | None:
        """Look up a column by exact name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None


class Catalog(BaseModel):
    """Ordered collection of table schemas built once per invocation."""

    model_config = ConfigDict(frozen=True)

    tables: tuple[TableSchema, ...] = ()

    def __iter__(self) -> Iterator[TableSchema]:  # type: ignore[override]
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def __contains__(self, table: object) -> bool:
        return table in self.tables

    def names(self) -> list[str]:
        """Return base table names in catalog order."""
        return [t.name for t in self.tables]

    def get(self, name: str) -> TableSchema | None:
        """Look up a table schema by base table name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None


class QueryPlan(BaseModel):
    """Structured search query produced by the translator before rendering."""

    model_config = ConfigDict(frozen=True)

    target: TableSchema
    match_expression: str
    filters: tuple[str, ...] = ()
    order_clause: str | None = None
    limit: int | None = None


class QueryReport(BaseModel):
    """Result of running a translated query."""

    query: str
    sql: str
    count: int
    rows: list[dict[str, Any]] = Field(default_factory=list)
