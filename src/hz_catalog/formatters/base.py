"""Formatter protocol and registry for output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hz_catalog.core.models import FixedRowSet


@runtime_checkable
class Formatter(Protocol):
    """Protocol for output formatters.

    Each formatter renders a FixedRowSet as lines of text. Column headers
    come from the row set's schema, so an empty result still has a shape.
    """

    def format(self, result: FixedRowSet) -> Iterator[str]:
        """Render a FixedRowSet as formatted output lines."""
        ...


class FormatterRegistry:
    """Formatters by name."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[Formatter]] = {}

    def register(self, name: str, formatter_class: type[Formatter]) -> None:
        self._formatters[name] = formatter_class

    def get(self, name: str, **kwargs: object) -> Formatter:
        """Return a formatter instance by name.

        Raises KeyError if the format name is not registered.
        """
        if name not in self._formatters:
            available = ", ".join(sorted(self._formatters))
            msg = f"Unknown format {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._formatters[name](**kwargs)

    @property
    def available(self) -> list[str]:
        return sorted(self._formatters)


registry = FormatterRegistry()
