"""Result models for hz-catalog.

Pydantic models for metadata result schemas, fixed row sets, the raw
catalog records they are built from, and product information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, ConfigDict, model_validator

from hz_catalog.core.exceptions import MalformedValueError
from hz_catalog.core.types import SqlColumnType

if TYPE_CHECKING:
    from hz_catalog.core.cursor import FixedResultCursor
    from hz_catalog.core.executor import RawRow

_INTEGER_FAMILIES = frozenset(
    {
        SqlColumnType.TINYINT,
        SqlColumnType.SMALLINT,
        SqlColumnType.INTEGER,
        SqlColumnType.BIGINT,
    }
)


class ColumnDescriptor(BaseModel):
    """One column of a metadata result schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_code: SqlColumnType
    nullable: bool

    def accepts(self, value: Any) -> bool:
        if value is None:
            return self.nullable
        if self.type_code == SqlColumnType.VARCHAR:
            return isinstance(value, str)
        if self.type_code == SqlColumnType.BOOLEAN:
            return isinstance(value, bool)
        if self.type_code in _INTEGER_FAMILIES:
            return isinstance(value, int) and not isinstance(value, bool)
        return True


class RowSchema(BaseModel):
    """Ordered column layout of a metadata result."""

    model_config = ConfigDict(frozen=True)

    columns: tuple[ColumnDescriptor, ...]

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def names(self) -> list[str]:
        return [col.name for col in self.columns]

    def index_of(self, name: str) -> int:
        """Zero-based position of a column, matched case-insensitively."""
        wanted = name.upper()
        for i, col in enumerate(self.columns):
            if col.name.upper() == wanted:
                return i
        raise KeyError(name)


class FixedRowSet(BaseModel):
    """Fully materialized metadata result with no link to the engine.

    Every row has exactly one value per schema column, and each value
    matches its column's nullability and type.
    """

    model_config = ConfigDict(frozen=True)

    row_schema: RowSchema
    rows: tuple[tuple[Any, ...], ...] = ()

    @model_validator(mode="after")
    def check_rows_match_schema(self) -> FixedRowSet:
        width = len(self.row_schema)
        for row_no, row in enumerate(self.rows, start=1):
            if len(row) != width:
                msg = f"Row {row_no} has {len(row)} values, schema has {width} columns"
                raise ValueError(msg)
            for col, value in zip(self.row_schema.columns, row, strict=True):
                if not col.accepts(value):
                    msg = (
                        f"Row {row_no}: value {value!r} not valid for column "
                        f"{col.name} ({col.type_code}, nullable={col.nullable})"
                    )
                    raise ValueError(msg)
        return self

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self.row_schema.columns

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def cursor(self) -> FixedResultCursor:
        """Open a new cursor positioned before the first row."""
        from hz_catalog.core.cursor import FixedResultCursor

        return FixedResultCursor(self)


class TableRecord(NamedTuple):
    """Raw values of one information_schema.tables row."""

    catalog: str | None
    schema: str | None
    name: str | None
    table_type: str | None

    @classmethod
    def from_raw(cls, row: RawRow) -> TableRecord:
        return cls(
            catalog=row.get_string(0),
            schema=row.get_string(1),
            name=row.get_string(2),
            table_type=row.get_string(3),
        )


class ColumnRecord(NamedTuple):
    """Raw values of one information_schema.columns row."""

    catalog: str | None
    schema: str | None
    table_name: str | None
    column_name: str | None
    data_type: str
    is_nullable: bool
    ordinal_position: int

    @classmethod
    def from_raw(cls, row: RawRow) -> ColumnRecord:
        data_type = row.get_string(4)
        if data_type is None:
            msg = "Catalog column row has no data_type"
            raise MalformedValueError(msg)
        return cls(
            catalog=row.get_string(0),
            schema=row.get_string(1),
            table_name=row.get_string(2),
            column_name=row.get_string(3),
            data_type=data_type,
            is_nullable=row.get_boolean(5),
            ordinal_position=row.get_int(6),
        )


class ProductInfo(BaseModel):
    """Static description of the engine and this tool."""

    model_config = ConfigDict(frozen=True)

    product_name: str
    product_version: str | None = None
    driver_name: str
    driver_version: str
    identifier_quote: str = '"'
    catalog_term: str = "catalog"
    schema_term: str = "schema"
    catalog_separator: str = "."
    read_only: bool = False
    supports_transactions: bool = False
    numeric_functions: tuple[str, ...] = ()
    string_functions: tuple[str, ...] = ()
