"""Column layouts of the metadata results.

These layouts are an external contract with client tooling: column names,
order and nullability follow java.sql.DatabaseMetaData. Each function
builds a new RowSchema per call.
"""

from __future__ import annotations

from hz_catalog.core.models import ColumnDescriptor, RowSchema
from hz_catalog.core.types import SqlColumnType

_V = SqlColumnType.VARCHAR
_I = SqlColumnType.INTEGER
_S = SqlColumnType.SMALLINT
_B = SqlColumnType.BOOLEAN


def _schema(*columns: tuple[str, SqlColumnType, bool]) -> RowSchema:
    return RowSchema(
        columns=tuple(
            ColumnDescriptor(name=name, type_code=type_code, nullable=nullable)
            for name, type_code, nullable in columns
        )
    )


def tables_schema() -> RowSchema:
    return _schema(
        ("TABLE_CAT", _V, True),
        ("TABLE_SCHEM", _V, True),
        ("TABLE_NAME", _V, False),
        ("TABLE_TYPE", _V, True),
        ("REMARKS", _V, True),
        ("TYPE_CAT", _V, True),
        ("TYPE_SCHEM", _V, True),
        ("TYPE_NAME", _V, True),
        ("SELF_REFERENCING_COL_NAME", _V, True),
        ("REF_GENERATION", _V, True),
    )


def columns_schema() -> RowSchema:
    return _schema(
        ("TABLE_CAT", _V, True),
        ("TABLE_SCHEM", _V, True),
        ("TABLE_NAME", _V, False),
        ("COLUMN_NAME", _V, False),
        ("DATA_TYPE", _S, False),
        ("TYPE_NAME", _V, False),
        ("COLUMN_SIZE", _I, False),
        ("BUFFER_LENGTH", _V, True),
        ("DECIMAL_DIGITS", _I, True),
        ("NUM_PREC_RADIX", _I, True),
        ("NULLABLE", _I, False),
        ("REMARKS", _V, True),
        ("COLUMN_DEF", _V, True),
        ("SQL_DATA_TYPE", _I, True),
        ("SQL_DATETIME_SUB", _I, True),
        # Only character columns report an octet length.
        ("CHAR_OCTET_LENGTH", _I, True),
        ("ORDINAL_POSITION", _I, False),
        ("IS_NULLABLE", _V, False),
        ("SCOPE_CATALOG", _V, True),
        ("SCOPE_SCHEMA", _V, True),
        ("SCOPE_TABLE", _V, True),
        ("SOURCE_DATA_TYPE", _S, True),
        ("IS_AUTOINCREMENT", _V, True),
        ("IS_GENERATEDCOLUMN", _V, True),
    )


def schemas_schema() -> RowSchema:
    return _schema(
        ("TABLE_CATALOG", _V, False),
        ("TABLE_SCHEM", _V, False),
    )


def catalogs_schema() -> RowSchema:
    return _schema(("TABLE_CAT", _V, False))


def table_types_schema() -> RowSchema:
    return _schema(("TABLE_TYPE", _V, False))


def type_info_schema() -> RowSchema:
    return _schema(
        ("TYPE_NAME", _V, True),
        ("DATA_TYPE", _I, True),
        ("PRECISION", _I, True),
        ("LITERAL_PREFIX", _V, True),
        ("LITERAL_SUFFIX", _V, True),
        ("CREATE_PARAMS", _V, True),
        ("NULLABLE", _S, True),
        ("CASE_SENSITIVE", _B, True),
        ("SEARCHABLE", _S, True),
        ("UNSIGNED_ATTRIBUTE", _B, True),
        ("FIXED_PREC_SCALE", _B, True),
        ("AUTO_INCREMENT", _B, True),
        ("LOCAL_TYPE_NAME", _V, True),
        ("MINIMUM_SCALE", _S, True),
        ("MAXIMUM_SCALE", _S, True),
        ("SQL_DATA_TYPE", _I, True),
        ("SQL_DATETIME_SUB", _I, True),
        ("NUM_PREC_RADIX", _I, True),
    )


def primary_keys_schema() -> RowSchema:
    return _schema(
        ("TABLE_CAT", _V, True),
        ("TABLE_SCHEM", _V, True),
        ("TABLE_NAME", _V, False),
        ("COLUMN_NAME", _V, False),
        ("KEY_SEQ", _S, False),
        ("PK_NAME", _V, True),
    )


def procedures_schema() -> RowSchema:
    return _schema(
        ("PROCEDURE_CAT", _V, True),
        ("PROCEDURE_SCHEM", _V, True),
        ("PROCEDURE_NAME", _V, False),
        ("RESERVED_1", _V, True),
        ("RESERVED_2", _V, True),
        ("RESERVED_3", _V, True),
        ("REMARKS", _V, True),
        ("PROCEDURE_TYPE", _S, False),
        ("SPECIFIC_NAME", _V, False),
    )


def functions_schema() -> RowSchema:
    return _schema(
        ("FUNCTION_CAT", _V, True),
        ("FUNCTION_SCHEM", _V, True),
        ("FUNCTION_NAME", _V, False),
        ("REMARKS", _V, True),
        ("FUNCTION_TYPE", _S, False),
        ("SPECIFIC_NAME", _V, False),
    )


def properties_schema() -> RowSchema:
    return _schema(
        ("property", _V, False),
        ("value", _V, True),
    )
