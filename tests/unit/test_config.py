"""Tests for configuration resolution."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from nlfts.core.config import (
    DEFAULT_MARKERS,
    NLFTSConfig,
    get_database_url,
    sqlite_path,
)


class TestNLFTSConfig:
    """Tests for NLFTSConfig."""

    def test_defaults(self):
        config = NLFTSConfig()
        assert config.mirror_suffix == "_fts"
        assert config.sample_size == 10
        assert config.markers == DEFAULT_MARKERS
        assert config.markers[0] == "containing"

    def test_sample_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            NLFTSConfig(sample_size=0)

    def test_suffix_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            NLFTSConfig(mirror_suffix="")

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NLFTS_MIRROR_SUFFIX", "_search")
        monkeypatch.setenv("NLFTS_SAMPLE_SIZE", "25")
        config = NLFTSConfig.from_env()
        assert config.mirror_suffix == "_search"
        assert config.sample_size == 25

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("NLFTS_MIRROR_SUFFIX", raising=False)
        monkeypatch.delenv("NLFTS_SAMPLE_SIZE", raising=False)
        assert NLFTSConfig.from_env() == NLFTSConfig()


class TestGetDatabaseUrl:
    """Tests for database URL resolution."""

    def test_url_passes_through(self):
        assert get_database_url("sqlite:///data/app.db") == "sqlite:///data/app.db"

    def test_path_becomes_sqlite_url(self):
        assert get_database_url("data/app.db") == f"sqlite:///{Path('data/app.db')}"

    def test_memory(self):
        assert get_database_url(":memory:") == "sqlite:///:memory:"

    def test_env_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NLFTS_DATABASE", "sqlite:///env.db")
        assert get_database_url(None) == "sqlite:///env.db"

    def test_argument_beats_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NLFTS_DATABASE", "sqlite:///env.db")
        assert get_database_url("sqlite:///arg.db") == "sqlite:///arg.db"

    def test_nothing_given(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("NLFTS_DATABASE", raising=False)
        assert get_database_url(None) is None


class TestSqlitePath:
    """Tests for extracting a file path from a SQLite URL."""

    def test_relative_path(self):
        assert sqlite_path("sqlite:///data/app.db") == Path("data/app.db")

    def test_absolute_path(self):
        assert sqlite_path("sqlite:////tmp/app.db") == Path("/tmp/app.db")

    def test_memory_has_no_path(self):
        assert sqlite_path("sqlite:///:memory:") is None

    def test_other_dialect_has_no_path(self):
        assert sqlite_path("postgresql://localhost/db") is None
