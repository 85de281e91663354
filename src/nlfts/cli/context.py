"""CLI context management for store access and shared options."""

import logging
import sys
from dataclasses import dataclass, field

from nlfts.core.config import NLFTSConfig, get_database_url, sqlite_path
from nlfts.core.store import SQLiteStore


class InvocationError(ValueError):
    """Invalid command-line invocation (missing or unusable arguments)."""


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout stays machine-readable."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@dataclass
class CLIContext:
    """Shared context for CLI commands.

    Manages the store lifecycle and output preferences.
    """

    config: NLFTSConfig
    pretty: bool = False
    echo: bool = False
    _store: SQLiteStore | None = field(default=None, init=False, repr=False)

    def open_store(self, database: str | None) -> SQLiteStore:
        """Open the store named on the command line (or by NLFTS_DATABASE).

        Raises:
            InvocationError: If no database is given or its file does not exist
        """
        url = get_database_url(database)
        if url is None:
            raise InvocationError("Missing database: pass a path or set NLFTS_DATABASE")

        path = sqlite_path(url)
        if path is not None and not path.is_file():
            raise InvocationError(f"Database file not found: {path}")

        self.close()
        self._store = SQLiteStore.from_url(url, echo=self.echo)
        return self._store

    def close(self) -> None:
        """Close the store if open."""
        if self._store is not None:
            self._store.close()
            self._store = None
