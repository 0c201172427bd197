"""Shared CLI plumbing for command modules.

Client creation, format-option handling, and output helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

import typer

from hz_catalog.cli.output import OutputFormat, get_formatter, write_output
from hz_catalog.core.client import HzClient
from hz_catalog.core.config import (
    ResolvedConfig,
    load_config,
    resolve_config,
    split_members,
)

if TYPE_CHECKING:
    from hz_catalog.core.models import FixedRowSet

FormatOption = Annotated[
    OutputFormat | None,
    typer.Option("--format", "-f", help="Output format: table|json|csv"),
]
TableOption = Annotated[
    bool,
    typer.Option("--table", help="Shorthand for --format table"),
]
CompactOption = Annotated[
    bool,
    typer.Option("--compact", help="Compact JSON output (no indentation)"),
]
WidthOption = Annotated[
    int | None,
    typer.Option("--width", help="Column width for table format"),
]
NoHeaderOption = Annotated[
    bool,
    typer.Option("--no-header", help="Suppress the header row"),
]


def get_resolved_config(ctx: typer.Context) -> ResolvedConfig:
    obj = ctx.ensure_object(dict)
    config = load_config(obj.get("config_file"))

    cli_overrides: dict[str, Any] = {}
    members = obj.get("member")
    if members:
        cli_overrides["member"] = [m for v in members for m in split_members(v)]
    for key in ("cluster_name", "timeout"):
        val = obj.get(key)
        if val is not None:
            cli_overrides[key] = val

    return resolve_config(
        config,
        profile_name=obj.get("profile"),
        dsn=obj.get("dsn"),
        **cli_overrides,
    )


def get_client(ctx: typer.Context) -> HzClient:
    return HzClient(get_resolved_config(ctx))


def _config_format(ctx: typer.Context) -> str | None:
    """default_format from the config file, when the file sets one."""
    config = load_config(ctx.ensure_object(dict).get("config_file"))
    if "default_format" in config.model_fields_set:
        return config.default_format
    return None


def format_options(ctx: typer.Context) -> dict[str, Any]:
    obj = ctx.ensure_object(dict)
    format_flag = obj.get("format")
    return {
        "format_flag": format_flag,
        "config_format": None if format_flag else _config_format(ctx),
        "compact": obj.get("compact", False),
        "width": obj.get("width", 40),
        "no_header": obj.get("no_header", False),
    }


def output_result(ctx: typer.Context, result: FixedRowSet) -> None:
    opts = format_options(ctx)
    formatter = get_formatter(**opts)
    write_output(formatter, result)


def apply_local_format_options(
    ctx: typer.Context,
    *,
    format: OutputFormat | None = None,
    table: bool = False,
    compact: bool = False,
    width: int | None = None,
    no_header: bool = False,
) -> None:
    if format is not None or table or compact or width is not None or no_header:
        obj = ctx.ensure_object(dict)
        if format is not None:
            obj["format"] = format.value
        if table:
            obj["format"] = "table"
        if compact:
            obj["compact"] = compact
        if width is not None:
            obj["width"] = width
        if no_header:
            obj["no_header"] = no_header
