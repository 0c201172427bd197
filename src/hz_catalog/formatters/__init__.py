"""Output formatters for metadata results."""

from hz_catalog.formatters.base import Formatter, FormatterRegistry, registry
from hz_catalog.formatters.csv import CSVFormatter
from hz_catalog.formatters.json import JSONFormatter
from hz_catalog.formatters.table import TableFormatter

__all__ = [
    "CSVFormatter",
    "Formatter",
    "FormatterRegistry",
    "JSONFormatter",
    "TableFormatter",
    "registry",
]
