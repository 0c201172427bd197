"""Forward-only cursor over a materialized metadata result.

State machine: BEFORE_FIRST -> ON_ROW -> ... -> AFTER_LAST. AFTER_LAST is
sticky. The cursor holds no engine resources; closing it only drops the
reference to the row set.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from hz_catalog.core.exceptions import CursorStateError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hz_catalog.core.models import ColumnDescriptor, FixedRowSet, RowSchema


class CursorState(StrEnum):
    BEFORE_FIRST = "before_first"
    ON_ROW = "on_row"
    AFTER_LAST = "after_last"


class FixedResultCursor:
    """Cursor over a FixedRowSet. Not thread-safe."""

    def __init__(self, row_set: FixedRowSet) -> None:
        self._row_set: FixedRowSet | None = row_set
        self._row_schema = row_set.row_schema
        self._position = -1
        self._state = CursorState.BEFORE_FIRST

    def __enter__(self) -> FixedResultCursor:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        while self.advance():
            yield self.current

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._row_set is None

    @property
    def row_schema(self) -> RowSchema:
        return self._row_schema

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self._row_schema.columns

    @property
    def row_set(self) -> FixedRowSet:
        return self._open_row_set()

    @property
    def row_number(self) -> int:
        """1-based number of the current row, 0 when not on a row."""
        return self._position + 1 if self._state == CursorState.ON_ROW else 0

    def _open_row_set(self) -> FixedRowSet:
        if self._row_set is None:
            msg = "Cursor is closed"
            raise CursorStateError(msg)
        return self._row_set

    def advance(self) -> bool:
        """Move to the next row. Returns False once past the last row."""
        rows = self._open_row_set().rows
        if self._state == CursorState.AFTER_LAST:
            return False
        self._position += 1
        if self._position < len(rows):
            self._state = CursorState.ON_ROW
            return True
        self._position = len(rows)
        self._state = CursorState.AFTER_LAST
        return False

    @property
    def current(self) -> tuple[Any, ...]:
        rows = self._open_row_set().rows
        if self._state != CursorState.ON_ROW:
            msg = f"No current row (cursor is {self._state.value})"
            raise CursorStateError(msg)
        return rows[self._position]

    def get(self, column: int | str) -> Any:
        """Value of the current row by zero-based index or column name."""
        row = self.current
        if isinstance(column, str):
            try:
                index = self._row_schema.index_of(column)
            except KeyError:
                msg = f"Unknown column: {column!r}"
                raise CursorStateError(msg) from None
        else:
            index = column
        if not 0 <= index < len(row):
            msg = f"Column index {index} out of range (0-{len(row) - 1})"
            raise CursorStateError(msg)
        return row[index]

    def close(self) -> None:
        self._row_set = None
