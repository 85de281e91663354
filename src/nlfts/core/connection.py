"""Database connection management for nlfts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Engine, create_engine, text

from nlfts.exceptions import ConnectionError

if TYPE_CHECKING:
    from sqlalchemy.engine.url import URL


class DatabaseConnection:
    """Manages the SQLAlchemy engine for an FTS5-enabled SQLite database.

    Only SQLite is supported: rendered queries rely on the FTS5 ``MATCH``
    operator and ``rowid``.
    """

    SUPPORTED_DIALECTS = ("sqlite",)

    def __init__(self, url: str | URL, echo: bool = False) -> None:
        """Initialize database connection.

        Args:
            url: Database connection URL, e.g. "sqlite:///path/to/db.sqlite"
                 or "sqlite:///:memory:"
            echo: Whether to echo SQL statements (for debugging)
        """
        self._url = str(url)
        self._echo = echo
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        """Get or create the SQLAlchemy engine.

        Raises:
            ConnectionError: If the engine cannot be created or the dialect
                is not supported
        """
        if self._engine is None:
            try:
                engine = create_engine(
                    self._url,
                    echo=self._echo,
                    connect_args={"check_same_thread": False}
                    if self._url.startswith("sqlite")
                    else {},
                )
            except Exception as e:
                raise ConnectionError(f"Failed to create database engine: {e}") from e

            if engine.dialect.name not in self.SUPPORTED_DIALECTS:
                engine.dispose()
                raise ConnectionError(
                    f"Unsupported database dialect: {engine.dialect.name}. "
                    f"Supported: {', '.join(self.SUPPORTED_DIALECTS)}",
                    {"url": self._url},
                )
            self._engine = engine
        return self._engine

    def test_connection(self) -> bool:
        """Test if the database connection works.

        Returns:
            True if connection is successful

        Raises:
            ConnectionError: If connection test fails
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except ConnectionError:
            raise
        except Exception as e:
            raise ConnectionError(f"Database connection test failed: {e}") from e

    def close(self) -> None:
        """Close the database connection and dispose of the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> DatabaseConnection:
        """Context manager entry."""
        self.test_connection()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
