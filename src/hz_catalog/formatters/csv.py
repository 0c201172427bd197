"""CSV formatter for metadata results (RFC 4180 compliant)."""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING, Any

from hz_catalog.formatters.base import registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hz_catalog.core.models import FixedRowSet


def _write_row(values: list[str]) -> str:
    buf = StringIO()
    writer = csv.writer(buf)
    writer.writerow(values)
    return buf.getvalue().rstrip("\r\n")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class CSVFormatter:
    def __init__(self, no_header: bool = False) -> None:
        self.no_header = no_header

    def format(self, result: FixedRowSet) -> Iterator[str]:
        if not self.no_header:
            yield _write_row([col.name for col in result.columns])

        for row in result.rows:
            yield _write_row([_cell(v) for v in row])


registry.register("csv", CSVFormatter)
