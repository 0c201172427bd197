"""Exception hierarchy for hz-catalog.

All exceptions carry an exit_code for CLI return value mapping.

Metadata operations swallow QueryExecutionError and MalformedValueError
(the result degrades to an empty row set). TypeMappingError always
propagates: it means the type registry lacks a family the catalog reports.
"""

from hz_catalog.core.exit_codes import ExitCode


class HzCatalogError(Exception):
    """Base exception for all hz-catalog errors."""

    exit_code: int = ExitCode.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class QueryExecutionError(HzCatalogError):
    """Engine failure while running a SQL statement."""

    exit_code: int = ExitCode.QUERY_ERROR


class NetworkError(QueryExecutionError):
    """Cluster unreachable, connection lost."""

    exit_code: int = ExitCode.NETWORK_ERROR


class TimeoutError(NetworkError):
    """Query timeout, cluster connect timeout."""

    exit_code: int = ExitCode.TIMEOUT


class MalformedValueError(HzCatalogError):
    """A raw catalog value cannot be read or materialized."""

    exit_code: int = ExitCode.QUERY_ERROR


class TypeMappingError(HzCatalogError):
    """Type family or native type name missing from the type registry."""

    exit_code: int = ExitCode.INTERNAL_ERROR


class CursorStateError(HzCatalogError):
    """Row access outside ON_ROW, or use of a closed cursor."""

    exit_code: int = ExitCode.USAGE_ERROR


class InputError(HzCatalogError):
    """Invalid parameters."""

    exit_code: int = ExitCode.INPUT_ERROR


class ConfigError(HzCatalogError):
    """Malformed config, missing profile."""

    exit_code: int = ExitCode.CONFIG_ERROR
