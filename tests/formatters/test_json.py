"""Tests for JSONFormatter."""

import json

import pytest

from hz_catalog.core import schemas
from hz_catalog.core.models import FixedRowSet
from hz_catalog.formatters.base import Formatter
from hz_catalog.formatters.json import JSONFormatter


def _schemas_result():
    return FixedRowSet(
        row_schema=schemas.schemas_schema(), rows=(("hazelcast", "public"),)
    )


@pytest.mark.unit
def test_json_formatter_implements_protocol():
    assert isinstance(JSONFormatter(), Formatter)


@pytest.mark.unit
def test_json_rows_as_objects():
    output = "\n".join(JSONFormatter().format(_schemas_result()))
    assert json.loads(output) == [
        {"TABLE_CATALOG": "hazelcast", "TABLE_SCHEM": "public"}
    ]


@pytest.mark.unit
def test_json_indented_by_default():
    output = "\n".join(JSONFormatter().format(_schemas_result()))
    assert "\n  " in output


@pytest.mark.unit
def test_json_compact_single_line():
    lines = list(JSONFormatter(compact=True).format(_schemas_result()))
    assert lines == ['[{"TABLE_CATALOG":"hazelcast","TABLE_SCHEM":"public"}]']


@pytest.mark.unit
def test_json_empty_result():
    result = FixedRowSet(row_schema=schemas.tables_schema())
    assert list(JSONFormatter(compact=True).format(result)) == ["[]"]


@pytest.mark.unit
def test_json_keeps_nulls_and_booleans():
    result = FixedRowSet(
        row_schema=schemas.type_info_schema(),
        rows=(("VARCHAR", 12, 2147483647, None, None, None, 1, True, 3, True, False,
               False, None, 0, 0, 0, 0, 0),),
    )  # fmt: skip
    data = json.loads("".join(JSONFormatter(compact=True).format(result)))[0]
    assert data["UNSIGNED_ATTRIBUTE"] is True
    assert data["LITERAL_PREFIX"] is None
    assert data["PRECISION"] == 2147483647
