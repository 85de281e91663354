"""Natural-language to FTS5 query translation.

A free-text request goes through fixed stages, each working on the lowercased,
trimmed text:

1. target resolution: first catalog table named in the text
2. match expression: search terms after a marker word, with quoted phrases
   protected while boolean and proximity operators are rewritten
3. filters: independent (pattern, builder) rules, all of them evaluated
4. ordering: ``latest`` / ``oldest`` on the first timestamp column
5. limit: ``top N`` / ``first N``

Only stage 1 can fail. Every other stage leaves its clause out when it has
nothing to contribute.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from nlfts.core.config import NLFTSConfig
from nlfts.core.types import Catalog, ColumnType, QueryPlan, TableSchema

logger = logging.getLogger(__name__)

FilterBuilder = Callable[[re.Match[str], TableSchema], str | None]

PHRASE_PATTERN = re.compile(r'"[^"]+"')
PLACEHOLDER_PATTERN = re.compile(r"__PHRASE(\d+)__")
BOOLEAN_OPERATORS = [
    (re.compile(r"\band\b"), "AND"),
    (re.compile(r"\bor\b"), "OR"),
    (re.compile(r"\bnot\b"), "NOT"),
]
NEAR_PATTERN = re.compile(r"(\w+)\s+near\s+(\d+)\s+(\w+)", re.IGNORECASE)

LIMIT_PATTERN = re.compile(r"\b(?:top|first)\s+(\d+)\b")

NUMERIC_TYPES = (ColumnType.FLOAT, ColumnType.INTEGER)


def normalize(raw_text: str) -> str:
    """Lowercase and trim a raw request."""
    return raw_text.strip().lower()


def rewrite_match_expression(segment: str) -> str:
    """Turn a search segment into an FTS5 match expression.

    Quoted phrases are swapped for placeholders first so that the operator
    rewrites cannot touch their contents, then restored verbatim.
    """
    phrases: list[str] = []

    def _stash(match: re.Match[str]) -> str:
        phrases.append(match.group(0))
        return f"__PHRASE{len(phrases) - 1}__"

    expression = PHRASE_PATTERN.sub(_stash, segment)

    for pattern, operator in BOOLEAN_OPERATORS:
        expression = pattern.sub(operator, expression)

    expression = NEAR_PATTERN.sub(r"\1 NEAR/\2 \3", expression)

    def _restore(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return phrases[index] if index < len(phrases) else match.group(0)

    expression = PLACEHOLDER_PATTERN.sub(_restore, expression)
    return expression.strip()


def _timestamp_filter(operator: str) -> FilterBuilder:
    def build(match: re.Match[str], table: TableSchema) -> str | None:
        column = table.first_column_of(ColumnType.TIMESTAMP)
        if column is None:
            return None
        return f"{column.name} {operator} '{match.group(1)}-01-01'"

    return build


def _numeric_filter(operator: str) -> FilterBuilder:
    def build(match: re.Match[str], table: TableSchema) -> str | None:
        column = table.first_column_of(*NUMERIC_TYPES)
        if column is None:
            return None
        return f"{column.name} {operator} {match.group(1)}"

    return build


def _id_filter(match: re.Match[str], table: TableSchema) -> str:
    column = table.column("id")
    if column is not None and column.type == ColumnType.INTEGER:
        return f"id = {match.group(1)}"
    return f"rowid = {match.group(1)}"


# Evaluated in order against the whole text; every matching rule contributes
FILTER_RULES: list[tuple[re.Pattern[str], FilterBuilder]] = [
    (re.compile(r"\bafter\s+(\d{4})"), _timestamp_filter(">=")),
    (re.compile(r"\bbefore\s+(\d{4})"), _timestamp_filter("<")),
    (re.compile(r"\b(?:less\s+than|under)\s+(\d+(?:\.\d+)?)"), _numeric_filter("<")),
    (
        re.compile(r"\b(?:greater\s+than|over|more\s+than)\s+(\d+(?:\.\d+)?)"),
        _numeric_filter(">"),
    ),
    (re.compile(r"\bid\s+(\d+)\b"), _id_filter),
]


class QueryTranslator:
    """Translates free-text requests into FTS5 queries over one catalog.

    Example:
        translator = QueryTranslator(catalog)
        translator.translate("latest orders about refund")
        # SELECT rowid, * FROM orders_fts WHERE orders_fts MATCH 'refund'
        #     ORDER BY created_at DESC
    """

    def __init__(self, catalog: Catalog, config: NLFTSConfig | None = None) -> None:
        self._catalog = catalog
        self._config = config or NLFTSConfig()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def resolve_target(self, text: str) -> TableSchema | None:
        """Return the first catalog table whose name (or singular) appears in ``text``."""
        for table in self._catalog:
            name = table.name.lower()
            candidates = {name, name.removesuffix("s")} - {""}
            if any(candidate in text for candidate in candidates):
                return table
        return None

    def extract_match_expression(self, text: str) -> str:
        """Take the text after the highest-priority marker present and rewrite it."""
        segment = text
        for marker in self._config.markers:
            if marker in text:
                segment = text.split(marker, 1)[1].strip()
                logger.debug(f"Search terms introduced by marker '{marker}'")
                break
        return rewrite_match_expression(segment)

    def extract_filters(self, text: str, table: TableSchema) -> list[str]:
        filters = []
        for pattern, build in FILTER_RULES:
            match = pattern.search(text)
            if match is None:
                continue
            fragment = build(match, table)
            if fragment is None:
                logger.debug(f"No column on '{table.name}' for '{match.group(0)}'")
                continue
            filters.append(fragment)
        return filters

    def extract_order(self, text: str, table: TableSchema) -> str | None:
        column = table.first_column_of(ColumnType.TIMESTAMP)
        if column is None:
            return None
        if "latest" in text:
            return f"ORDER BY {column.name} DESC"
        if "oldest" in text:
            return f"ORDER BY {column.name} ASC"
        return None

    def extract_limit(self, text: str) -> int | None:
        match = LIMIT_PATTERN.search(text)
        return int(match.group(1)) if match else None

    def plan(self, raw_text: str) -> QueryPlan | None:
        """Build a query plan, or return None when no target table is named.

        Args:
            raw_text: Free-text request, e.g. "show top 3 latest orders"

        Returns:
            QueryPlan for the resolved table, or None if the request
            cannot be interpreted
        """
        text = normalize(raw_text)
        target = self.resolve_target(text)
        if target is None:
            logger.info(f"No known table in request: {raw_text!r}")
            return None

        return QueryPlan(
            target=target,
            match_expression=self.extract_match_expression(text),
            filters=tuple(self.extract_filters(text, target)),
            order_clause=self.extract_order(text, target),
            limit=self.extract_limit(text),
        )

    def render(self, plan: QueryPlan) -> str:
        """Render a plan as a single SQL string against the target's mirror table."""
        mirror = plan.target.mirror_name(self._config.mirror_suffix)
        literal = plan.match_expression.replace("'", "''")

        parts = [f"SELECT rowid, * FROM {mirror} WHERE {mirror} MATCH '{literal}'"]
        parts.extend(f"AND {fragment}" for fragment in plan.filters)
        if plan.order_clause:
            parts.append(plan.order_clause)
        if plan.limit is not None:
            parts.append(f"LIMIT {plan.limit}")
        return " ".join(parts)

    def translate(self, raw_text: str) -> str | None:
        """Translate a request to SQL, or None if it cannot be interpreted."""
        plan = self.plan(raw_text)
        if plan is None:
            return None
        sql = self.render(plan)
        logger.debug(f"Translated {raw_text!r} -> {sql}")
        return sql


def translate(catalog: Catalog, raw_text: str, config: NLFTSConfig | None = None) -> str | None:
    """Translate ``raw_text`` against ``catalog``; None means not understood."""
    return QueryTranslator(catalog, config).translate(raw_text)
