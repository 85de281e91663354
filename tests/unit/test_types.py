"""Tests for core types."""

import pytest
from pydantic import ValidationError

from nlfts.core.types import (
    Catalog,
    ColumnSchema,
    ColumnType,
    QueryPlan,
    QueryReport,
    TableSchema,
)


@pytest.fixture
def orders() -> TableSchema:
    return TableSchema(
        name="orders",
        columns=(
            ColumnSchema(name="note", type=ColumnType.TEXT),
            ColumnSchema(name="qty", type=ColumnType.INTEGER),
            ColumnSchema(name="total", type=ColumnType.FLOAT),
            ColumnSchema(name="created_at", type=ColumnType.TIMESTAMP),
            ColumnSchema(name="shipped_at", type=ColumnType.TIMESTAMP),
        ),
    )


class TestColumnType:
    """Tests for ColumnType enum."""

    def test_all_types_exist(self):
        assert ColumnType.values() == ["integer", "float", "timestamp", "text"]

    def test_from_string(self):
        assert ColumnType("timestamp") == ColumnType.TIMESTAMP


class TestColumnSchema:
    """Tests for ColumnSchema model."""

    def test_defaults_to_text(self):
        assert ColumnSchema(name="body").type == ColumnType.TEXT

    def test_is_frozen(self):
        column = ColumnSchema(name="body")
        with pytest.raises(ValidationError):
            column.name = "other"


class TestTableSchema:
    """Tests for TableSchema model."""

    def test_mirror_name(self, orders: TableSchema):
        assert orders.mirror_name() == "orders_fts"
        assert orders.mirror_name("_idx") == "orders_idx"

    def test_first_column_of(self, orders: TableSchema):
        assert orders.first_column_of(ColumnType.TIMESTAMP).name == "created_at"

    def test_first_column_of_any_type_uses_schema_order(self, orders: TableSchema):
        assert orders.first_column_of(ColumnType.FLOAT, ColumnType.INTEGER).name == "qty"

    def test_first_column_of_missing(self):
        assert TableSchema(name="notes").first_column_of(ColumnType.FLOAT) is None

    def test_column_lookup(self, orders: TableSchema):
        assert orders.column("total").type == ColumnType.FLOAT
        assert orders.column("missing") is None


class TestCatalog:
    """Tests for Catalog model."""

    def test_iteration_keeps_order(self, orders: TableSchema):
        books = TableSchema(name="books")
        catalog = Catalog(tables=(books, orders))
        assert [t.name for t in catalog] == ["books", "orders"]
        assert catalog.names() == ["books", "orders"]
        assert len(catalog) == 2

    def test_get(self, orders: TableSchema):
        catalog = Catalog(tables=(orders,))
        assert catalog.get("orders") == orders
        assert catalog.get("books") is None

    def test_membership(self, orders: TableSchema):
        catalog = Catalog(tables=(orders,))
        assert orders in catalog
        assert TableSchema(name="books") not in catalog

    def test_empty(self):
        assert len(Catalog()) == 0


class TestQueryPlan:
    """Tests for QueryPlan and QueryReport models."""

    def test_defaults(self, orders: TableSchema):
        plan = QueryPlan(target=orders, match_expression="refund")
        assert plan.filters == ()
        assert plan.order_clause is None
        assert plan.limit is None

    def test_is_frozen(self, orders: TableSchema):
        plan = QueryPlan(target=orders, match_expression="refund")
        with pytest.raises(ValidationError):
            plan.limit = 5

    def test_report_dump(self):
        report = QueryReport(query="q", sql="SELECT 1", count=1, rows=[{"a": 1}])
        assert report.model_dump() == {
            "query": "q",
            "sql": "SELECT 1",
            "count": 1,
            "rows": [{"a": 1}],
        }
