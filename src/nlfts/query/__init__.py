"""Natural-language query translation and execution.

Example:
    >>> from nlfts.query import translate
    >>> sql = translate(catalog, "show top 3 latest orders")
"""

from nlfts.query.executor import NOT_UNDERSTOOD, QueryExecutor, ask, not_understood
from nlfts.query.translator import QueryTranslator, rewrite_match_expression, translate

__all__ = [
    "QueryTranslator",
    "QueryExecutor",
    "translate",
    "ask",
    "rewrite_match_expression",
    "not_understood",
    "NOT_UNDERSTOOD",
]
