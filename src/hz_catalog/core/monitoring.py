"""Sentry integration for error tracking and performance monitoring.

Sentry is initialized early in main() after logging setup. The DSN comes
from the SENTRY_DSN environment variable; without it the SDK stays disabled.
"""

import sentry_sdk

from hz_catalog.__about__ import __version__


def setup_sentry(environment: str = "local", dsn: str | None = None) -> None:
    """Initialize Sentry; a missing DSN leaves event sending disabled."""
    sentry_sdk.init(
        dsn=dsn,
        traces_sample_rate=0.03,
        environment=environment,
        release=__version__,
        attach_stacktrace=True,
        send_default_pii=False,
    )
