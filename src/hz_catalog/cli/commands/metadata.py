"""Metadata introspection CLI commands.

Each command runs one CatalogMetadata operation and prints its row set.
Commands backed by the information_schema connect to the cluster; the
fixed ones (schemas, catalogs, table-types, type-info) do not.
"""

from __future__ import annotations

from typing import Annotated

import typer

from hz_catalog.cli.commands._shared import (
    CompactOption,
    FormatOption,
    NoHeaderOption,
    TableOption,
    WidthOption,
    apply_local_format_options,
    get_client,
    output_result,
)
from hz_catalog.core.metadata import CatalogMetadata


def _offline_metadata() -> CatalogMetadata:
    """Facade without a cluster connection, for fixed operations."""
    return CatalogMetadata(None)


def tables_command(
    ctx: typer.Context,
    pattern: Annotated[
        str | None,
        typer.Argument(help="Table name LIKE pattern (default: all tables)"),
    ] = None,
    catalog: Annotated[
        str | None,
        typer.Option("--catalog", help="Catalog LIKE pattern"),
    ] = None,
    schema: Annotated[
        str | None,
        typer.Option("--schema", "-s", help="Schema LIKE pattern"),
    ] = None,
    types: Annotated[
        list[str] | None,
        typer.Option("--type", "-t", help="Table type to include (repeatable)"),
    ] = None,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """
    List tables and views.

    Filters are SQL LIKE patterns matched against information_schema.tables.
    Use --type BASE TABLE or --type VIEW to restrict the table types.
    """
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )

    with get_client(ctx) as client:
        cursor = CatalogMetadata(client).list_tables(catalog, schema, pattern, types)
    output_result(ctx, cursor.row_set)


def columns_command(
    ctx: typer.Context,
    table_pattern: Annotated[
        str | None,
        typer.Argument(help="Table name LIKE pattern (default: all tables)"),
    ] = None,
    column: Annotated[
        str | None,
        typer.Option("--column", help="Column name LIKE pattern"),
    ] = None,
    catalog: Annotated[
        str | None,
        typer.Option("--catalog", help="Catalog LIKE pattern"),
    ] = None,
    schema: Annotated[
        str | None,
        typer.Option("--schema", "-s", help="Schema LIKE pattern"),
    ] = None,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """
    List table columns with their JDBC type information.

    Types are mapped through the type registry: DATA_TYPE is the
    java.sql.Types code and TYPE_NAME the display name.
    """
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )

    with get_client(ctx) as client:
        cursor = CatalogMetadata(client).list_columns(
            catalog, schema, table_pattern, column
        )
    output_result(ctx, cursor.row_set)


def schemas_command(
    ctx: typer.Context,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """List schemas. Hazelcast exposes a single public schema."""
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )
    output_result(ctx, _offline_metadata().list_schemas().row_set)


def catalogs_command(
    ctx: typer.Context,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """List catalogs."""
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )
    output_result(ctx, _offline_metadata().list_catalogs().row_set)


def table_types_command(
    ctx: typer.Context,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """List the supported table types."""
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )
    output_result(ctx, _offline_metadata().list_table_types().row_set)


def type_info_command(
    ctx: typer.Context,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """List the SQL types the cluster supports."""
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )
    output_result(ctx, _offline_metadata().list_type_info().row_set)


def info_command(
    ctx: typer.Context,
    offline: Annotated[
        bool,
        typer.Option("--offline", help="Skip the cluster version lookup"),
    ] = False,
    format: FormatOption = None,
    table: TableOption = False,
    compact: CompactOption = False,
    width: WidthOption = None,
    no_header: NoHeaderOption = False,
) -> None:
    """Show product and driver information."""
    apply_local_format_options(
        ctx,
        format=format,
        table=table,
        compact=compact,
        width=width,
        no_header=no_header,
    )

    if offline:
        cursor = _offline_metadata().describe_product()
    else:
        with get_client(ctx) as client:
            cursor = CatalogMetadata(client).describe_product()
    output_result(ctx, cursor.row_set)
