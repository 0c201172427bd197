"""Standard exit codes for hz-catalog.

Exit codes follow Unix conventions; each exception class in
exceptions.py carries one of these.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for hz-catalog commands."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INPUT_ERROR = 3
    NETWORK_ERROR = 5
    TIMEOUT = 6
    CONFIG_ERROR = 7
    QUERY_ERROR = 8
    INTERNAL_ERROR = 9
