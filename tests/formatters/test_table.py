"""Tests for TableFormatter."""

import pytest

from hz_catalog.core import schemas
from hz_catalog.core.models import FixedRowSet
from hz_catalog.formatters.base import Formatter
from hz_catalog.formatters.table import TableFormatter


def _make_result(rows=(("BASE TABLE",), ("VIEW",))):
    return FixedRowSet(row_schema=schemas.table_types_schema(), rows=tuple(rows))


@pytest.mark.unit
def test_table_formatter_implements_protocol():
    assert isinstance(TableFormatter(), Formatter)


@pytest.mark.unit
def test_table_formatter_outputs_column_headers():
    output = "\n".join(TableFormatter().format(_make_result()))
    assert "TABLE_TYPE" in output


@pytest.mark.unit
def test_table_formatter_outputs_row_values():
    output = "\n".join(TableFormatter().format(_make_result()))
    assert "BASE TABLE" in output
    assert "VIEW" in output


@pytest.mark.unit
def test_table_formatter_empty_result_shows_no_results():
    lines = list(TableFormatter().format(_make_result(rows=[])))
    assert lines == ["No results"]


@pytest.mark.unit
def test_table_formatter_truncates_long_values():
    output = "\n".join(TableFormatter(width=6).format(_make_result()))
    assert "BASE …" in output
    assert "BASE TABLE" not in output


@pytest.mark.unit
def test_table_formatter_no_header():
    output = "\n".join(TableFormatter(no_header=True).format(_make_result()))
    assert "TABLE_TYPE" not in output
    assert "VIEW" in output
