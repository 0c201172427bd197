"""Query executor protocol.

The metadata layer talks to the engine only through these interfaces:
an executor that runs SQL with positional parameters and hands back a
forward-only cursor of raw rows with zero-based, typed ordinal access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from hz_catalog.core.exceptions import MalformedValueError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

_TRUE_STRINGS = frozenset({"true", "yes", "y", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "n", "0"})


class RawRow:
    """One engine row with typed access by zero-based ordinal.

    Null handling follows the usual driver conventions: get_string returns
    None, get_boolean returns False and get_int returns 0.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Sequence[Any]) -> None:
        self._values = tuple(values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RawRow({self._values!r})"

    def get_object(self, index: int) -> Any:
        if not 0 <= index < len(self._values):
            msg = f"Column index {index} out of range for row of {len(self._values)}"
            raise MalformedValueError(msg)
        return self._values[index]

    def get_string(self, index: int) -> str | None:
        value = self.get_object(index)
        if value is None:
            return None
        return str(value)

    def get_boolean(self, index: int) -> bool:
        value = self.get_object(index)
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        msg = f"Column {index}: cannot read {value!r} as boolean"
        raise MalformedValueError(msg)

    def get_int(self, index: int) -> int:
        value = self.get_object(index)
        if value is None:
            return 0
        if isinstance(value, bool):
            msg = f"Column {index}: cannot read boolean {value!r} as integer"
            raise MalformedValueError(msg)
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        msg = f"Column {index}: cannot read {value!r} as integer"
        raise MalformedValueError(msg)


@runtime_checkable
class RawCursor(Protocol):
    """Forward-only iteration over raw rows; close() releases engine resources."""

    def __iter__(self) -> Iterator[RawRow]: ...

    def close(self) -> None: ...


@runtime_checkable
class QueryExecutor(Protocol):
    """Runs SQL text with positional ``?`` parameters."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> RawCursor: ...


@runtime_checkable
class ServerVersionSource(Protocol):
    """Executors that can report the engine version."""

    def server_version(self) -> str | None: ...
