"""Column type inference from sample values.

A column's type is decided over the whole sample set, never per value: one
non-conforming sample demotes the column to the next rule down, ending at
``TEXT``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Protocol

from nlfts.core.types import ColumnType

logger = logging.getLogger(__name__)

# Checked in order; integers are also valid floats so INTEGER must come first.
# INTEGER and FLOAT must match the whole value, TIMESTAMP only its date prefix.
TYPE_RULES: list[tuple[ColumnType, Callable[[str], re.Match[str] | None]]] = [
    (ColumnType.INTEGER, re.compile(r"\d+", re.ASCII).fullmatch),
    (ColumnType.FLOAT, re.compile(r"\d+(\.\d+)?", re.ASCII).fullmatch),
    (ColumnType.TIMESTAMP, re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII).match),
]


class SampleSource(Protocol):
    """Anything able to sample non-null column values as text."""

    def sample_values(self, table: str, column: str, limit: int = 10) -> list[str]: ...


def infer_column_type(samples: Iterable[str]) -> ColumnType:
    """Classify a column from its sampled textual values.

    Args:
        samples: Non-null values rendered as text

    Returns:
        The first type whose pattern every sample satisfies, or TEXT when
        there are no samples or none of the patterns fits all of them
    """
    values = list(samples)
    if not values:
        return ColumnType.TEXT

    for column_type, matches in TYPE_RULES:
        if all(matches(value) for value in values):
            return column_type
    return ColumnType.TEXT


class ColumnTypeInferrer:
    """Samples a column from the store and infers its type."""

    def __init__(self, source: SampleSource, sample_size: int = 10) -> None:
        self._source = source
        self._sample_size = sample_size

    def infer(self, table: str, column: str) -> ColumnType:
        samples = self._source.sample_values(table, column, self._sample_size)
        column_type = infer_column_type(samples)
        logger.debug(f"{table}.{column}: {len(samples)} samples -> {column_type}")
        return column_type
