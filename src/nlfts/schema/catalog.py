"""Catalog discovery: typed schemas for every base table with a full-text mirror."""

from __future__ import annotations

import logging

from nlfts.core.config import NLFTSConfig
from nlfts.core.store import SQLiteStore
from nlfts.core.types import Catalog, ColumnSchema, TableSchema
from nlfts.exceptions import NLFTSError, TableNotFoundError
from nlfts.schema.inference import ColumnTypeInferrer

logger = logging.getLogger(__name__)


class CatalogBuilder:
    """Builds a :class:`Catalog` from the mirror tables present in a store.

    Discovery starts from mirror names (``<table><suffix>``) but each schema
    describes the base table: its columns come from the base table and their
    types are inferred from base-table samples. An entry whose base table is
    missing or unreadable is skipped, never failing the whole build.
    """

    def __init__(self, store: SQLiteStore, config: NLFTSConfig | None = None) -> None:
        self._store = store
        self._config = config or NLFTSConfig()
        self._inferrer = ColumnTypeInferrer(store, sample_size=self._config.sample_size)

    def base_table_name(self, mirror_name: str) -> str:
        """Strip the mirror suffix from a mirror table name."""
        suffix = self._config.mirror_suffix
        if mirror_name.endswith(suffix):
            return mirror_name[: -len(suffix)]
        return mirror_name

    def build_table(self, mirror_name: str) -> TableSchema:
        """Build the typed schema of the base table behind one mirror.

        Raises:
            TableNotFoundError: If the base table does not exist or has no columns
            QueryError: If sampling the base table fails
        """
        base = self.base_table_name(mirror_name)
        try:
            names = self._store.list_columns(base)
        except TableNotFoundError as e:
            raise TableNotFoundError(base, mirror_name) from e

        columns = tuple(
            ColumnSchema(name=name, type=self._inferrer.infer(base, name)) for name in names
        )
        return TableSchema(name=base, columns=columns)

    def build(self) -> Catalog:
        """Discover mirror tables and build one schema per readable base table."""
        tables: list[TableSchema] = []
        for mirror_name in self._store.list_mirror_tables(self._config.mirror_suffix):
            try:
                tables.append(self.build_table(mirror_name))
            except NLFTSError as e:
                logger.warning(f"Skipping mirror table '{mirror_name}': {e.message}")
                continue

        logger.info(f"Catalog built with {len(tables)} table(s): {[t.name for t in tables]}")
        return Catalog(tables=tuple(tables))


def build_catalog(store: SQLiteStore, config: NLFTSConfig | None = None) -> Catalog:
    """Build a fresh catalog for one invocation."""
    return CatalogBuilder(store, config).build()
