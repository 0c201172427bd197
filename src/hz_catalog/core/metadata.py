"""Catalog metadata operations.

Framework-agnostic entry points for metadata introspection; the CLI layer
in cli/commands/metadata.py provides the typer interface.

Query-backed operations never raise on engine failures: a failed catalog
query, or a row that cannot be read, degrades to an empty result with the
correct column layout. Callers iterate metadata optimistically, so "nothing
found" is the contract. A TypeMappingError is the exception: it propagates.
"""

from __future__ import annotations

from contextlib import closing
from typing import TYPE_CHECKING, TypeVar

from hz_catalog.__about__ import __version__
from hz_catalog.core import schemas as layouts
from hz_catalog.core.exceptions import (
    HzCatalogError,
    MalformedValueError,
    QueryExecutionError,
)
from hz_catalog.core.executor import ServerVersionSource
from hz_catalog.core.logging import get_logger
from hz_catalog.core.materializer import RowMaterializer
from hz_catalog.core.models import ColumnRecord, ProductInfo, TableRecord
from hz_catalog.core.queries import columns_query, tables_query
from hz_catalog.core.types import DEFAULT_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from hz_catalog.core.cursor import FixedResultCursor
    from hz_catalog.core.executor import QueryExecutor, RawRow
    from hz_catalog.core.models import FixedRowSet, RowSchema
    from hz_catalog.core.queries import CatalogQuery
    from hz_catalog.core.types import TypeRegistry

R = TypeVar("R")

PRODUCT_NAME = "Hazelcast"
DRIVER_NAME = "hz-catalog"

NUMERIC_FUNCTIONS = (
    "ABS", "CEIL", "DEGREES", "EXP", "FLOOR", "LN", "LOG10", "RAND", "ROUND",
    "SIGN", "TRUNCATE", "ACOS", "ASIN", "ATAN", "COS", "COT", "SIN", "TAN",
)  # fmt: skip
STRING_FUNCTIONS = (
    "ASCII", "BTRIM", "INITCAP", "LENGTH", "LIKE", "ESCAPE", "LOWER", "LTRIM",
    "RTRIM", "SUBSTRING", "TRIM", "UPPER",
)  # fmt: skip


class CatalogMetadata:
    """Metadata introspection against one query executor.

    With no executor, query-backed operations return empty results and
    product_info reports no server version.
    """

    def __init__(
        self,
        executor: QueryExecutor | None,
        registry: TypeRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self.executor = executor
        self.materializer = RowMaterializer(registry)

    # -- query-backed -------------------------------------------------------

    def list_tables(
        self,
        catalog: str | None = None,
        schema: str | None = None,
        table_name: str | None = None,
        types: Iterable[str] | None = None,
    ) -> FixedResultCursor:
        return self._query_backed(
            "list_tables",
            tables_query(catalog, schema, table_name, types),
            TableRecord.from_raw,
            self.materializer.tables,
            layouts.tables_schema,
        )

    def list_columns(
        self,
        catalog: str | None = None,
        schema: str | None = None,
        table_name: str | None = None,
        column_name: str | None = None,
    ) -> FixedResultCursor:
        return self._query_backed(
            "list_columns",
            columns_query(catalog, schema, table_name, column_name),
            ColumnRecord.from_raw,
            self.materializer.columns,
            layouts.columns_schema,
        )

    def _query_backed(
        self,
        operation: str,
        query: CatalogQuery,
        read_record: Callable[[RawRow], R],
        materialize: Callable[[list[R]], FixedRowSet],
        row_schema: Callable[[], RowSchema],
    ) -> FixedResultCursor:
        log = get_logger(__name__)
        try:
            records = self._fetch(query, read_record)
        except Exception as e:
            log.debug(
                "metadata query failed, returning empty result",
                operation=operation,
                error=str(e),
            )
            return self.materializer.empty(row_schema()).cursor()

        try:
            row_set = materialize(records)
        except MalformedValueError as e:
            log.debug(
                "metadata rows malformed, returning empty result",
                operation=operation,
                error=e.message,
            )
            return self.materializer.empty(row_schema()).cursor()

        log.debug(
            "metadata rows materialized", operation=operation, rows=len(records)
        )
        return row_set.cursor()

    def _fetch(
        self, query: CatalogQuery, read_record: Callable[[RawRow], R]
    ) -> list[R]:
        if self.executor is None:
            msg = "No query executor configured"
            raise QueryExecutionError(msg)
        with closing(self.executor.execute(query.sql, query.params)) as cursor:
            return [read_record(row) for row in cursor]

    # -- fixed --------------------------------------------------------------

    def list_schemas(
        self, catalog: str | None = None, schema_pattern: str | None = None
    ) -> FixedResultCursor:
        """The single fixed schema; filter arguments are accepted and ignored."""
        return self.materializer.schemas().cursor()

    def list_catalogs(self) -> FixedResultCursor:
        return self.materializer.catalogs().cursor()

    def list_table_types(self) -> FixedResultCursor:
        return self.materializer.table_types().cursor()

    def list_type_info(self) -> FixedResultCursor:
        return self.materializer.type_info().cursor()

    def list_primary_keys(
        self,
        catalog: str | None = None,
        schema: str | None = None,
        table_name: str | None = None,
    ) -> FixedResultCursor:
        return self.materializer.empty(layouts.primary_keys_schema()).cursor()

    def list_procedures(
        self,
        catalog: str | None = None,
        schema_pattern: str | None = None,
        procedure_pattern: str | None = None,
    ) -> FixedResultCursor:
        return self.materializer.empty(layouts.procedures_schema()).cursor()

    def list_functions(
        self,
        catalog: str | None = None,
        schema_pattern: str | None = None,
        function_pattern: str | None = None,
    ) -> FixedResultCursor:
        return self.materializer.empty(layouts.functions_schema()).cursor()

    # -- product ------------------------------------------------------------

    def product_info(self) -> ProductInfo:
        return ProductInfo(
            product_name=PRODUCT_NAME,
            product_version=self._server_version(),
            driver_name=DRIVER_NAME,
            driver_version=__version__,
            numeric_functions=NUMERIC_FUNCTIONS,
            string_functions=STRING_FUNCTIONS,
        )

    def describe_product(self) -> FixedResultCursor:
        return self.materializer.product_info(self.product_info()).cursor()

    def _server_version(self) -> str | None:
        if not isinstance(self.executor, ServerVersionSource):
            return None
        try:
            return self.executor.server_version()
        except HzCatalogError as e:
            log = get_logger(__name__)
            log.debug("server version unavailable", error=e.message)
            return None

