"""Output format selection and TTY auto-detection."""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import TYPE_CHECKING

from hz_catalog.core.exceptions import InputError

if TYPE_CHECKING:
    from hz_catalog.core.models import FixedRowSet
    from hz_catalog.formatters.base import Formatter


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def detect_tty() -> bool:
    return sys.stdout.isatty()


def resolve_format(format_flag: str | None, config_format: str | None = None) -> str:
    """Determine the output format.

    Explicit --format overrides the config file's default_format, which
    overrides TTY detection. Default: table for TTY, csv for pipes.
    """
    if format_flag is not None:
        return format_flag
    if config_format is not None:
        return config_format
    return "table" if detect_tty() else "csv"


def get_formatter(
    format_flag: str | None = None,
    *,
    config_format: str | None = None,
    compact: bool = False,
    width: int = 40,
    no_header: bool = False,
) -> Formatter:
    """Build and return the appropriate formatter instance."""
    from hz_catalog.formatters import registry

    fmt_name = resolve_format(format_flag, config_format)

    kwargs: dict[str, object] = {}
    if fmt_name == "table":
        kwargs["width"] = width
        kwargs["no_header"] = no_header
    elif fmt_name == "json":
        kwargs["compact"] = compact
    elif fmt_name == "csv":
        kwargs["no_header"] = no_header

    try:
        return registry.get(fmt_name, **kwargs)
    except KeyError as e:
        raise InputError(e.args[0]) from None


def write_output(formatter: Formatter, result: FixedRowSet) -> None:
    """Write formatted output to stdout."""
    for line in formatter.format(result):
        sys.stdout.write(line + "\n")
