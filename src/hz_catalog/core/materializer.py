"""Row materialization for metadata results.

Turns catalog records (or statically known values) into FixedRowSets laid
out per core.schemas. The type registry is passed in explicitly; nothing
here reaches for process-wide state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from hz_catalog.core import schemas as layouts
from hz_catalog.core.exceptions import MalformedValueError
from hz_catalog.core.models import FixedRowSet, RowSchema
from hz_catalog.core.types import (
    COLUMN_NO_NULLS,
    COLUMN_NULLABLE,
    NUMERIC_RADIX,
    TYPE_NULLABLE,
    TYPE_SEARCHABLE,
    SqlColumnType,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hz_catalog.core.models import ColumnRecord, ProductInfo, TableRecord
    from hz_catalog.core.types import TypeRegistry

DEFAULT_CATALOG = "hazelcast"
DEFAULT_SCHEMA = "public"
TABLE_TYPES = ("BASE TABLE", "VIEW")


def build_row_set(
    row_schema: RowSchema, rows: Iterable[tuple[Any, ...]]
) -> FixedRowSet:
    """Validate rows against the schema; bad values raise MalformedValueError."""
    try:
        return FixedRowSet(row_schema=row_schema, rows=tuple(rows))
    except ValidationError as e:
        msg = f"Cannot materialize metadata rows: {e}"
        raise MalformedValueError(msg) from e


class RowMaterializer:
    def __init__(self, registry: TypeRegistry) -> None:
        self.registry = registry

    def empty(self, row_schema: RowSchema) -> FixedRowSet:
        return FixedRowSet(row_schema=row_schema)

    def tables(self, records: Iterable[TableRecord]) -> FixedRowSet:
        rows = [
            (rec.catalog, rec.schema, rec.name, rec.table_type) + (None,) * 6
            for rec in records
        ]
        return build_row_set(layouts.tables_schema(), rows)

    def columns(self, records: Iterable[ColumnRecord]) -> FixedRowSet:
        """Columns rows; raises TypeMappingError for unregistered data types."""
        return build_row_set(
            layouts.columns_schema(), [self._column_row(rec) for rec in records]
        )

    def _column_row(self, rec: ColumnRecord) -> tuple[Any, ...]:
        family = self.registry.family_for(rec.data_type)
        info = self.registry.describe(family)
        return (
            rec.catalog,
            rec.schema,
            rec.table_name,
            rec.column_name,
            info.standard_type_code,
            info.display_name,
            info.precision,
            None,  # BUFFER_LENGTH
            info.scale or None,
            NUMERIC_RADIX if self.registry.is_numeric(family) else None,
            COLUMN_NULLABLE if rec.is_nullable else COLUMN_NO_NULLS,
            None,  # REMARKS
            None,  # COLUMN_DEF
            None,  # SQL_DATA_TYPE
            None,  # SQL_DATETIME_SUB
            info.precision if family == SqlColumnType.VARCHAR else None,
            rec.ordinal_position,
            "YES" if rec.is_nullable else "NO",
            None,  # SCOPE_CATALOG
            None,  # SCOPE_SCHEMA
            None,  # SCOPE_TABLE
            None,  # SOURCE_DATA_TYPE
            None,  # IS_AUTOINCREMENT
            None,  # IS_GENERATEDCOLUMN
        )

    def schemas(self) -> FixedRowSet:
        return build_row_set(
            layouts.schemas_schema(), [(DEFAULT_CATALOG, DEFAULT_SCHEMA)]
        )

    def catalogs(self) -> FixedRowSet:
        return build_row_set(layouts.catalogs_schema(), [(DEFAULT_CATALOG,)])

    def table_types(self) -> FixedRowSet:
        return build_row_set(
            layouts.table_types_schema(), [(t,) for t in TABLE_TYPES]
        )

    def type_info(self) -> FixedRowSet:
        rows: list[tuple[Any, ...]] = []
        for family in self.registry.type_info_families():
            info = self.registry.describe(family)
            rows.append(
                (
                    info.display_name,
                    info.standard_type_code,
                    info.precision,
                    None,  # LITERAL_PREFIX
                    None,  # LITERAL_SUFFIX
                    None,  # CREATE_PARAMS
                    TYPE_NULLABLE,
                    True,  # CASE_SENSITIVE
                    TYPE_SEARCHABLE,
                    not info.signed,
                    False,  # FIXED_PREC_SCALE
                    False,  # AUTO_INCREMENT
                    None,  # LOCAL_TYPE_NAME
                    0,
                    0,
                    0,
                    0,
                    0,
                )
            )
        return build_row_set(layouts.type_info_schema(), rows)

    def product_info(self, info: ProductInfo) -> FixedRowSet:
        rows = [
            ("product_name", info.product_name),
            ("product_version", info.product_version),
            ("driver_name", info.driver_name),
            ("driver_version", info.driver_version),
            ("identifier_quote", info.identifier_quote),
            ("catalog_term", info.catalog_term),
            ("schema_term", info.schema_term),
            ("catalog_separator", info.catalog_separator),
            ("read_only", str(info.read_only).lower()),
            ("supports_transactions", str(info.supports_transactions).lower()),
            ("numeric_functions", ",".join(info.numeric_functions)),
            ("string_functions", ",".join(info.string_functions)),
        ]
        return build_row_set(layouts.properties_schema(), rows)
