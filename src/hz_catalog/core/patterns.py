"""Filter pattern normalization for catalog queries.

Callers pass name filters in SQL LIKE syntax. An unspecified filter (None or
the empty string) means "no filter", never "match the empty name".
"""

from __future__ import annotations

MATCH_ALL = "%"


def normalize(value: str | None) -> str:
    """Return the LIKE pattern for a caller filter value."""
    if not value:
        return MATCH_ALL
    return value
