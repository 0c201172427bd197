"""Catalog query construction.

Builds information_schema queries for the query-backed metadata operations.
Filter values are never spliced into the SQL text: every pattern and every
table-type literal travels as a bound ``?`` parameter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from hz_catalog.core.patterns import normalize

if TYPE_CHECKING:
    from collections.abc import Iterable

_TABLES_SQL = """
SELECT
    table_catalog,
    table_schema,
    table_name,
    table_type
FROM information_schema.tables
WHERE table_catalog LIKE ?
  AND table_schema LIKE ?
  AND table_name LIKE ?
"""

_COLUMNS_SQL = """
SELECT
    table_catalog,
    table_schema,
    table_name,
    column_name,
    data_type,
    is_nullable,
    ordinal_position
FROM information_schema.columns
WHERE table_catalog LIKE ?
  AND table_schema LIKE ?
  AND table_name LIKE ?
  AND column_name LIKE ?
"""


class CatalogQuery(NamedTuple):
    """SQL text plus its positional parameters."""

    sql: str
    params: tuple[Any, ...]


def tables_query(
    catalog: str | None = None,
    schema: str | None = None,
    table_name: str | None = None,
    types: Iterable[str] | None = None,
) -> CatalogQuery:
    """Query information_schema.tables, optionally restricted to table types."""
    params: list[Any] = [normalize(catalog), normalize(schema), normalize(table_name)]
    sql = _TABLES_SQL

    if isinstance(types, str):
        types = (types,)
    type_list = list(dict.fromkeys(types or ()))
    if type_list:
        placeholders = ", ".join("?" for _ in type_list)
        sql = f"{sql}  AND table_type IN ({placeholders})\n"
        params.extend(type_list)

    return CatalogQuery(sql=sql, params=tuple(params))


def columns_query(
    catalog: str | None = None,
    schema: str | None = None,
    table_name: str | None = None,
    column_name: str | None = None,
) -> CatalogQuery:
    """Query information_schema.columns; rows arrive in ordinal order."""
    return CatalogQuery(
        sql=_COLUMNS_SQL,
        params=(
            normalize(catalog),
            normalize(schema),
            normalize(table_name),
            normalize(column_name),
        ),
    )
