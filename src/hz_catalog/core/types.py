"""Type system registry.

Maps Hazelcast SQL type families onto the standardized (JDBC) type
vocabulary reported by metadata results: numeric type code, display name,
precision, scale and signedness.

The registry is built once at import time and is read-only afterwards, so
it can be shared between threads without locking.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from hz_catalog.core.exceptions import TypeMappingError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_UNBOUNDED = 2_147_483_647

# Hazelcast's DECIMAL limits (HazelcastTypeSystem).
_MAX_DECIMAL_PRECISION = 76
_MAX_DECIMAL_SCALE = 38


class SqlColumnType(StrEnum):
    """Type families of the engine, as reported by information_schema."""

    VARCHAR = "VARCHAR"
    BOOLEAN = "BOOLEAN"
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    DECIMAL = "DECIMAL"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    DATE = "DATE"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    TIMESTAMP_WITH_TIME_ZONE = "TIMESTAMP_WITH_TIME_ZONE"
    OBJECT = "OBJECT"
    JSON = "JSON"
    ROW = "ROW"
    NULL = "NULL"


class JdbcType(IntEnum):
    """java.sql.Types codes used in metadata results."""

    NULL = 0
    DECIMAL = 3
    INTEGER = 4
    SMALLINT = 5
    REAL = 7
    DOUBLE = 8
    VARCHAR = 12
    BOOLEAN = 16
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    OTHER = 1111
    JAVA_OBJECT = 2000
    STRUCT = 2002
    TIMESTAMP_WITH_TIMEZONE = 2014
    BIGINT = -5
    TINYINT = -6


# DatabaseMetaData constants
COLUMN_NO_NULLS = 0
COLUMN_NULLABLE = 1
TYPE_NULLABLE = 1
TYPE_SEARCHABLE = 3

NUMERIC_RADIX = 10


class TypeDescriptor(BaseModel):
    """Standardized description of one type family."""

    model_config = ConfigDict(frozen=True)

    family: SqlColumnType
    standard_type_code: int
    display_name: str
    precision: int
    scale: int = 0
    signed: bool = False


def _descriptor(
    family: SqlColumnType,
    code: JdbcType,
    precision: int,
    scale: int = 0,
    *,
    signed: bool = False,
) -> TypeDescriptor:
    return TypeDescriptor(
        family=family,
        standard_type_code=int(code),
        display_name=family.value.replace("_", " "),
        precision=precision,
        scale=scale,
        signed=signed,
    )


_DESCRIPTORS: tuple[TypeDescriptor, ...] = (
    _descriptor(SqlColumnType.VARCHAR, JdbcType.VARCHAR, _UNBOUNDED),
    _descriptor(SqlColumnType.BOOLEAN, JdbcType.BOOLEAN, 1),
    _descriptor(SqlColumnType.TINYINT, JdbcType.TINYINT, 3, signed=True),
    _descriptor(SqlColumnType.SMALLINT, JdbcType.SMALLINT, 5, signed=True),
    _descriptor(SqlColumnType.INTEGER, JdbcType.INTEGER, 10, signed=True),
    _descriptor(SqlColumnType.BIGINT, JdbcType.BIGINT, 19, signed=True),
    _descriptor(
        SqlColumnType.DECIMAL,
        JdbcType.DECIMAL,
        _MAX_DECIMAL_PRECISION,
        _MAX_DECIMAL_SCALE,
        signed=True,
    ),
    _descriptor(SqlColumnType.REAL, JdbcType.REAL, 7, signed=True),
    _descriptor(SqlColumnType.DOUBLE, JdbcType.DOUBLE, 15, signed=True),
    _descriptor(SqlColumnType.DATE, JdbcType.DATE, 10),
    _descriptor(SqlColumnType.TIME, JdbcType.TIME, 18),
    _descriptor(SqlColumnType.TIMESTAMP, JdbcType.TIMESTAMP, 29),
    _descriptor(
        SqlColumnType.TIMESTAMP_WITH_TIME_ZONE, JdbcType.TIMESTAMP_WITH_TIMEZONE, 35
    ),
    _descriptor(SqlColumnType.OBJECT, JdbcType.JAVA_OBJECT, _UNBOUNDED),
    _descriptor(SqlColumnType.JSON, JdbcType.OTHER, _UNBOUNDED),
    _descriptor(SqlColumnType.ROW, JdbcType.STRUCT, _UNBOUNDED),
    _descriptor(SqlColumnType.NULL, JdbcType.NULL, 0),
)

_NUMERIC_FAMILIES = frozenset(
    {
        SqlColumnType.TINYINT,
        SqlColumnType.SMALLINT,
        SqlColumnType.INTEGER,
        SqlColumnType.BIGINT,
        SqlColumnType.DECIMAL,
        SqlColumnType.REAL,
        SqlColumnType.DOUBLE,
    }
)

# Order of rows in a type-info result.
_TYPE_INFO_FAMILIES: tuple[SqlColumnType, ...] = (
    SqlColumnType.VARCHAR,
    SqlColumnType.BOOLEAN,
    SqlColumnType.BIGINT,
    SqlColumnType.TINYINT,
    SqlColumnType.SMALLINT,
    SqlColumnType.INTEGER,
    SqlColumnType.DECIMAL,
    SqlColumnType.REAL,
    SqlColumnType.DOUBLE,
    SqlColumnType.TIME,
    SqlColumnType.DATE,
    SqlColumnType.TIMESTAMP,
    SqlColumnType.TIMESTAMP_WITH_TIME_ZONE,
    SqlColumnType.OBJECT,
    SqlColumnType.JSON,
)


class TypeRegistry:
    """Read-only lookup from type family to TypeDescriptor.

    Lookups for unknown families raise TypeMappingError: a catalog column
    whose type is not registered is a defect in this table, not a runtime
    condition to paper over.
    """

    def __init__(
        self,
        descriptors: Iterable[TypeDescriptor],
        *,
        numeric: Iterable[SqlColumnType] = (),
        type_info_order: Iterable[SqlColumnType] = (),
    ) -> None:
        self._descriptors: Mapping[SqlColumnType, TypeDescriptor] = MappingProxyType(
            {d.family: d for d in descriptors}
        )
        self._numeric = frozenset(numeric)
        self._type_info_order = tuple(type_info_order)

    def describe(self, family: SqlColumnType) -> TypeDescriptor:
        try:
            return self._descriptors[family]
        except KeyError:
            msg = f"No type mapping registered for family {family!r}"
            raise TypeMappingError(msg) from None

    def family_for(self, native_name: str) -> SqlColumnType:
        """Resolve a catalog data_type name (e.g. 'TIMESTAMP WITH TIME ZONE')."""
        key = "_".join(native_name.strip().upper().split())
        try:
            family = SqlColumnType(key)
        except ValueError:
            msg = f"Unknown native type name: {native_name!r}"
            raise TypeMappingError(msg) from None
        if family not in self._descriptors:
            msg = f"No type mapping registered for family {family!r}"
            raise TypeMappingError(msg)
        return family

    def display_name(self, family: SqlColumnType) -> str:
        return self.describe(family).display_name

    def jdbc_type(self, family: SqlColumnType) -> int:
        return self.describe(family).standard_type_code

    def is_numeric(self, family: SqlColumnType) -> bool:
        self.describe(family)
        return family in self._numeric

    def type_info_families(self) -> tuple[SqlColumnType, ...]:
        return self._type_info_order

    def __contains__(self, family: object) -> bool:
        return family in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)


DEFAULT_REGISTRY = TypeRegistry(
    _DESCRIPTORS,
    numeric=_NUMERIC_FAMILIES,
    type_info_order=_TYPE_INFO_FAMILIES,
)
