"""Tests for the fixed result cursor."""

import pytest

from hz_catalog.core import schemas
from hz_catalog.core.cursor import CursorState, FixedResultCursor
from hz_catalog.core.exceptions import CursorStateError
from hz_catalog.core.models import FixedRowSet


@pytest.fixture
def row_set():
    return FixedRowSet(
        row_schema=schemas.table_types_schema(), rows=(("BASE TABLE",), ("VIEW",))
    )


@pytest.mark.unit
class TestCursorMovement:
    def test_starts_before_first(self, row_set):
        cursor = FixedResultCursor(row_set)
        assert cursor.state == CursorState.BEFORE_FIRST
        assert cursor.row_number == 0

    def test_advances_through_rows(self, row_set):
        cursor = row_set.cursor()
        assert cursor.advance()
        assert cursor.state == CursorState.ON_ROW
        assert cursor.row_number == 1
        assert cursor.current == ("BASE TABLE",)
        assert cursor.advance()
        assert cursor.row_number == 2
        assert cursor.get(0) == "VIEW"
        assert not cursor.advance()
        assert cursor.state == CursorState.AFTER_LAST

    def test_after_last_is_sticky(self, row_set):
        cursor = row_set.cursor()
        while cursor.advance():
            pass
        for _ in range(3):
            assert not cursor.advance()
            assert cursor.state == CursorState.AFTER_LAST

    def test_empty_result(self):
        cursor = FixedRowSet(row_schema=schemas.catalogs_schema()).cursor()
        assert not cursor.advance()
        assert cursor.state == CursorState.AFTER_LAST
        assert cursor.row_number == 0

    def test_iteration_yields_remaining_rows(self, row_set):
        cursor = row_set.cursor()
        cursor.advance()
        assert list(cursor) == [("VIEW",)]


@pytest.mark.unit
class TestCursorAccess:
    def test_current_before_first_raises(self, row_set):
        with pytest.raises(CursorStateError, match="before_first"):
            _ = row_set.cursor().current

    def test_current_after_last_raises(self, row_set):
        cursor = row_set.cursor()
        list(cursor)
        with pytest.raises(CursorStateError, match="after_last"):
            cursor.get(0)

    def test_get_by_name(self, row_set):
        cursor = row_set.cursor()
        cursor.advance()
        assert cursor.get("table_type") == "BASE TABLE"

    def test_get_unknown_name(self, row_set):
        cursor = row_set.cursor()
        cursor.advance()
        with pytest.raises(CursorStateError, match="Unknown column"):
            cursor.get("REMARKS")

    def test_get_index_out_of_range(self, row_set):
        cursor = row_set.cursor()
        cursor.advance()
        with pytest.raises(CursorStateError, match="out of range"):
            cursor.get(1)

    def test_schema_exposed(self, row_set):
        cursor = row_set.cursor()
        assert cursor.row_schema.names == ["TABLE_TYPE"]
        assert cursor.columns[0].name == "TABLE_TYPE"


@pytest.mark.unit
class TestCursorClose:
    def test_close(self, row_set):
        cursor = row_set.cursor()
        cursor.close()
        assert cursor.closed
        with pytest.raises(CursorStateError, match="closed"):
            cursor.advance()

    def test_context_manager_closes(self, row_set):
        with row_set.cursor() as cursor:
            assert cursor.advance()
        assert cursor.closed

    def test_schema_survives_close(self, row_set):
        cursor = row_set.cursor()
        cursor.close()
        assert cursor.row_schema.names == ["TABLE_TYPE"]

    def test_row_set_unavailable_after_close(self, row_set):
        cursor = row_set.cursor()
        cursor.close()
        with pytest.raises(CursorStateError):
            _ = cursor.row_set
