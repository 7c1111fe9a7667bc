"""
Structured filter builders for name lookups.

Patterns are bound as parameters, never concatenated into SQL, and LIKE
wildcards typed by the user are escaped so they match literally.
"""

from collections.abc import Sequence

from sqlalchemy import false, or_
from sqlalchemy.sql.elements import ColumnElement

LIKE_ESCAPE = "\\"


def escape_like(value: str, escape: str = LIKE_ESCAPE) -> str:
    """Escape LIKE wildcards (``%``, ``_``) and the escape char itself."""
    return value.replace(escape, escape * 2).replace("%", f"{escape}%").replace("_", f"{escape}_")


def substring_pattern(value: str) -> str:
    """``'mar'`` -> ``'%mar%'`` with wildcards in the value escaped."""
    return f"%{escape_like(value.strip())}%"


def build_substring_filter(column: ColumnElement, patterns: Sequence[str]) -> ColumnElement[bool]:
    """
    Case-insensitive "contains any of" predicate over ``column``.

    Args:
        column: Text column to match
        patterns: Fragments; blanks are ignored

    Returns:
        OR of one ILIKE per fragment (a false predicate when nothing is left)
    """
    clauses = [
        column.ilike(substring_pattern(pattern), escape=LIKE_ESCAPE)
        for pattern in patterns
        if pattern and pattern.strip()
    ]
    if not clauses:
        return false()
    return or_(*clauses)
