"""Shared test fixtures for nlfts."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from nlfts.core.store import SQLiteStore
from nlfts.core.types import Catalog, ColumnSchema, ColumnType, TableSchema

BOOKS = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "1925-04-10", 218),
    ("Tender Is the Night", "F. Scott Fitzgerald", "1934-04-12", 320),
    ("Gatsby Revisited", "Jane Critic", "1915-06-01", 150),
    ("Moby Dick", "Herman Melville", "1851-10-18", 635),
]

ORDERS = [
    ("alice", "refund requested for damaged mug", 19.99, "2024-01-05 10:00:00"),
    ("bob", "refund issued", 42.5, "2024-03-10 09:30:00"),
    ("carol", "gift wrap please", 5.0, "2024-02-01 12:00:00"),
    ("dave", "partial refund", 12.0, "2024-02-20 08:15:00"),
]


def _mirror(conn, table: str, columns: list[str]) -> None:
    """Create and fill a <table>_fts mirror the way the external sync job does."""
    col_list = ", ".join(columns)
    conn.execute(text(f"CREATE VIRTUAL TABLE {table}_fts USING fts5({col_list})"))
    conn.execute(
        text(
            f"INSERT INTO {table}_fts (rowid, {col_list}) SELECT rowid, {col_list} FROM {table}"
        )
    )


def create_library_db(path: Path) -> str:
    """Build a SQLite file with books and orders plus their FTS5 mirrors."""
    url = f"sqlite:///{path}"
    engine = create_engine(url)
    with engine.begin() as conn:
        conn.execute(
            text("CREATE TABLE books (title TEXT, author TEXT, published_at TEXT, pages INTEGER)")
        )
        conn.execute(
            text("INSERT INTO books VALUES (:title, :author, :published_at, :pages)"),
            [dict(zip(("title", "author", "published_at", "pages"), b)) for b in BOOKS],
        )
        conn.execute(
            text("CREATE TABLE orders (customer TEXT, note TEXT, total REAL, created_at TEXT)")
        )
        conn.execute(
            text("INSERT INTO orders VALUES (:customer, :note, :total, :created_at)"),
            [dict(zip(("customer", "note", "total", "created_at"), o)) for o in ORDERS],
        )
        _mirror(conn, "books", ["title", "author", "published_at"])
        _mirror(conn, "orders", ["customer", "note", "created_at"])

        # Tables that must not be mistaken for mirrors
        conn.execute(text("CREATE TABLE settings (key TEXT, value TEXT)"))
        conn.execute(text("CREATE TABLE draftsfts (body TEXT)"))
    engine.dispose()
    return url


@pytest.fixture
def library_db(tmp_path: Path) -> str:
    """URL of a fresh SQLite database with books/orders and their mirrors."""
    return create_library_db(tmp_path / "library.db")


@pytest.fixture
def library_path(library_db: str) -> str:
    """Filesystem path of the library database (as given on the command line)."""
    return library_db.removeprefix("sqlite:///")


@pytest.fixture
def store(library_db: str) -> Generator[SQLiteStore, None, None]:
    """Store over the library database."""
    database = SQLiteStore.from_url(library_db)
    yield database
    database.close()


@pytest.fixture
def catalog() -> Catalog:
    """Hand-built catalog used by translator tests (no database needed)."""

    def table(name: str, *columns: tuple[str, ColumnType]) -> TableSchema:
        return TableSchema(
            name=name,
            columns=tuple(ColumnSchema(name=n, type=t) for n, t in columns),
        )

    return Catalog(
        tables=(
            table(
                "books",
                ("title", ColumnType.TEXT),
                ("author", ColumnType.TEXT),
                ("published_at", ColumnType.TIMESTAMP),
                ("pages", ColumnType.INTEGER),
            ),
            table(
                "orders",
                ("customer", ColumnType.TEXT),
                ("note", ColumnType.TEXT),
                ("total", ColumnType.FLOAT),
                ("created_at", ColumnType.TIMESTAMP),
            ),
            table(
                "products",
                ("name", ColumnType.TEXT),
                ("price", ColumnType.FLOAT),
                ("stock", ColumnType.INTEGER),
            ),
            table(
                "users",
                ("id", ColumnType.INTEGER),
                ("name", ColumnType.TEXT),
                ("email", ColumnType.TEXT),
            ),
        )
    )
