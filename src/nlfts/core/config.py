"""Runtime configuration for nlfts."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MIRROR_SUFFIX = "_fts"
DEFAULT_SAMPLE_SIZE = 10

# Marker words that introduce the search terms, highest priority first
DEFAULT_MARKERS = ("containing", "named", "called", "with", "matching", "about")


class NLFTSConfig(BaseModel):
    """Settings shared by the catalog builder and the translator."""

    mirror_suffix: str = Field(
        default=DEFAULT_MIRROR_SUFFIX,
        min_length=1,
        description="Suffix that names a full-text mirror table (<table><suffix>)",
    )
    sample_size: int = Field(
        default=DEFAULT_SAMPLE_SIZE,
        ge=1,
        description="Number of non-null values sampled per column for type inference",
    )
    markers: tuple[str, ...] = Field(
        default=DEFAULT_MARKERS,
        description="Marker words introducing the search terms, in priority order",
    )

    @classmethod
    def from_env(cls) -> NLFTSConfig:
        """Build config from NLFTS_MIRROR_SUFFIX and NLFTS_SAMPLE_SIZE."""
        values: dict[str, object] = {}
        if suffix := os.getenv("NLFTS_MIRROR_SUFFIX"):
            values["mirror_suffix"] = suffix
        if sample_size := os.getenv("NLFTS_SAMPLE_SIZE"):
            values["sample_size"] = sample_size
        return cls.model_validate(values)


def get_database_url(url: str | None) -> str | None:
    """Resolve database URL from CLI arg or environment variable.

    Priority:
    1. Explicit argument
    2. NLFTS_DATABASE environment variable

    A bare filesystem path is turned into a ``sqlite:///`` URL.
    """
    resolved = url or os.getenv("NLFTS_DATABASE")
    if not resolved:
        return None
    if "://" in resolved:
        return resolved
    if resolved == ":memory:":
        return "sqlite:///:memory:"
    return f"sqlite:///{Path(resolved).expanduser()}"


def sqlite_path(url: str) -> Path | None:
    """Return the filesystem path behind a SQLite URL, or None for memory/other URLs."""
    prefix = "sqlite:///"
    if not url.startswith(prefix):
        return None
    path = url[len(prefix) :].split("?", 1)[0]
    if not path or path == ":memory:":
        return None
    return Path(path)
