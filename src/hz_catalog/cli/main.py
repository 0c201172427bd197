"""hz-catalog main entry point and command registration."""

from __future__ import annotations

import atexit
from pathlib import Path  # noqa: TC003
from typing import Annotated

import sentry_sdk
import typer

from hz_catalog.__about__ import __version__
from hz_catalog.cli.commands.config import config_app
from hz_catalog.cli.commands.metadata import (
    catalogs_command,
    columns_command,
    info_command,
    schemas_command,
    table_types_command,
    tables_command,
    type_info_command,
)
from hz_catalog.cli.output import OutputFormat  # noqa: TC001
from hz_catalog.core.exceptions import HzCatalogError
from hz_catalog.core.logging import setup_logging
from hz_catalog.core.monitoring import setup_sentry

app = typer.Typer(
    help="hz-catalog - Hazelcast SQL catalog browser",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")
app.command("tables")(tables_command)
app.command("columns")(columns_command)
app.command("schemas")(schemas_command)
app.command("catalogs")(catalogs_command)
app.command("table-types")(table_types_command)
app.command("type-info")(type_info_command)
app.command("info")(info_command)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hz-catalog {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
    profile: Annotated[
        str | None,
        typer.Option("--profile", "-P", help="Named cluster profile"),
    ] = None,
    member: Annotated[
        list[str] | None,
        typer.Option(
            "--member", "-m", help="Cluster member host:port (repeatable)"
        ),
    ] = None,
    cluster_name: Annotated[
        str | None,
        typer.Option("--cluster-name", "-c", help="Cluster name"),
    ] = None,
    dsn: Annotated[
        str | None,
        typer.Option("--dsn", help="Connection DSN (hazelcast://...)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Query timeout in seconds"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: table|json|csv"),
    ] = None,
    table: Annotated[
        bool,
        typer.Option("--table", help="Shorthand for --format table"),
    ] = False,
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Compact JSON output (no indentation)"),
    ] = False,
    width: Annotated[
        int,
        typer.Option("--width", help="Column width for table format"),
    ] = 40,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", help="Suppress the header row"),
    ] = False,
) -> None:
    """hz-catalog - Hazelcast SQL catalog browser."""
    setup_logging(verbose)
    setup_sentry()

    transaction = sentry_sdk.start_transaction(
        op="cli", name=ctx.invoked_subcommand or "hz-catalog"
    )
    transaction.__enter__()

    def cleanup() -> None:
        transaction.__exit__(None, None, None)
        sentry_sdk.flush(timeout=2)

    atexit.register(cleanup)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["profile"] = profile
    ctx.obj["member"] = member
    ctx.obj["cluster_name"] = cluster_name
    ctx.obj["dsn"] = dsn
    ctx.obj["config_file"] = config_file
    ctx.obj["timeout"] = timeout

    # Format options (global)
    fmt = "table" if table else (format.value if format else None)
    ctx.obj["format"] = fmt
    ctx.obj["compact"] = compact
    ctx.obj["width"] = width
    ctx.obj["no_header"] = no_header


def run() -> None:
    """Entry point with global error handling."""
    try:
        app()
    except HzCatalogError as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e.message}", err=True)
        raise SystemExit(e.exit_code) from None
    except SystemExit:
        raise
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except Exception as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
