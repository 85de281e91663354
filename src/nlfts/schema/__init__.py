"""Schema discovery and column type inference."""

from nlfts.schema.catalog import CatalogBuilder, build_catalog
from nlfts.schema.inference import ColumnTypeInferrer, infer_column_type

__all__ = ["CatalogBuilder", "build_catalog", "ColumnTypeInferrer", "infer_column_type"]
