"""Tests for output format selection and TTY detection."""

import pytest

from hz_catalog.cli.output import (
    OutputFormat,
    get_formatter,
    resolve_format,
    write_output,
)
from hz_catalog.core import schemas
from hz_catalog.core.exceptions import InputError
from hz_catalog.core.models import FixedRowSet
from hz_catalog.formatters.csv import CSVFormatter
from hz_catalog.formatters.json import JSONFormatter
from hz_catalog.formatters.table import TableFormatter


@pytest.mark.unit
def test_output_format_enum_values():
    assert OutputFormat.TABLE.value == "table"
    assert OutputFormat.JSON.value == "json"
    assert OutputFormat.CSV.value == "csv"


@pytest.mark.unit
@pytest.mark.parametrize("fmt", ["json", "table", "csv"])
def test_resolve_format_explicit(fmt):
    assert resolve_format(fmt) == fmt


@pytest.mark.unit
def test_resolve_format_tty_defaults_to_table(monkeypatch):
    monkeypatch.setattr("hz_catalog.cli.output.detect_tty", lambda: True)
    assert resolve_format(None) == "table"


@pytest.mark.unit
def test_resolve_format_non_tty_defaults_to_csv(monkeypatch):
    monkeypatch.setattr("hz_catalog.cli.output.detect_tty", lambda: False)
    assert resolve_format(None) == "csv"


@pytest.mark.unit
def test_resolve_format_explicit_overrides_tty(monkeypatch):
    monkeypatch.setattr("hz_catalog.cli.output.detect_tty", lambda: True)
    assert resolve_format("json") == "json"


@pytest.mark.unit
def test_resolve_format_config_default_beats_tty(monkeypatch):
    monkeypatch.setattr("hz_catalog.cli.output.detect_tty", lambda: False)
    assert resolve_format(None, "json") == "json"


@pytest.mark.unit
def test_resolve_format_flag_beats_config_default():
    assert resolve_format("csv", "json") == "csv"


@pytest.mark.unit
def test_get_formatter_types():
    assert isinstance(get_formatter("table"), TableFormatter)
    assert isinstance(get_formatter("json"), JSONFormatter)
    assert isinstance(get_formatter("csv"), CSVFormatter)


@pytest.mark.unit
def test_get_formatter_passes_options():
    assert get_formatter("table", width=12).width == 12
    assert get_formatter("json", compact=True).compact is True
    assert get_formatter("csv", no_header=True).no_header is True


@pytest.mark.unit
def test_get_formatter_uses_config_format():
    assert isinstance(get_formatter(None, config_format="json"), JSONFormatter)


@pytest.mark.unit
def test_get_formatter_unknown_name():
    with pytest.raises(InputError, match="Unknown format 'yaml'"):
        get_formatter("yaml")


@pytest.mark.unit
def test_write_output(capsys):
    result = FixedRowSet(row_schema=schemas.catalogs_schema(), rows=(("hazelcast",),))
    write_output(CSVFormatter(), result)
    assert capsys.readouterr().out == "TABLE_CAT\nhazelcast\n"
