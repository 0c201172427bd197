"""Hazelcast client for hz-catalog.

Wraps hazelcast-python-client with SQL execution, query timeout, and
exception mapping to the HzCatalogError hierarchy. Implements the
QueryExecutor and ServerVersionSource protocols from core.executor.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import hazelcast
import sentry_sdk
from hazelcast.errors import HazelcastError, OperationTimeoutError
from hazelcast.sql import HazelcastSqlError

from hz_catalog.core.exceptions import NetworkError, QueryExecutionError, TimeoutError
from hz_catalog.core.executor import RawRow
from hz_catalog.core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from hazelcast.sql import SqlResult

    from hz_catalog.core.config import ResolvedConfig


def _map_error(e: HazelcastError, timeout: float) -> QueryExecutionError:
    if isinstance(e, OperationTimeoutError):
        return TimeoutError(f"Query timed out after {timeout}s: {e}")
    if isinstance(e, HazelcastSqlError):
        return QueryExecutionError(f"SQL error: {e}")
    return NetworkError(f"Cluster error: {e}")


class HzCursor:
    """Rows of one SqlResult, released on close."""

    def __init__(self, result: SqlResult, timeout: float) -> None:
        self._result = result
        self._timeout = timeout
        self.row_count = 0

    def __iter__(self) -> Iterator[RawRow]:
        try:
            for row in self._result:
                self.row_count += 1
                width = row.metadata.column_count
                yield RawRow([row.get_object_with_index(i) for i in range(width)])
        except HazelcastError as e:
            raise _map_error(e, self._timeout) from e

    def close(self) -> None:
        self._result.close()


class HzClient:
    """Synchronous Hazelcast SQL client."""

    def __init__(self, config: ResolvedConfig) -> None:
        self.config = config
        self._client: hazelcast.HazelcastClient | None = None

    def __enter__(self) -> HzClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _connect(self) -> hazelcast.HazelcastClient:
        if self._client is not None:
            return self._client

        members = ",".join(self.config.cluster_members)
        try:
            self._client = hazelcast.HazelcastClient(
                cluster_name=self.config.cluster_name,
                cluster_members=list(self.config.cluster_members),
                cluster_connect_timeout=self.config.connect_timeout,
                client_name=self.config.client_name,
            )
        except HazelcastError as e:
            msg = (
                f"Connection failed to {members} "
                f"cluster '{self.config.cluster_name}': {e}"
            )
            raise NetworkError(msg) from e

        return self._client

    def execute(self, sql: str, params: Sequence[Any] = ()) -> HzCursor:
        """Execute SQL with positional parameters and return a cursor."""
        log = get_logger(__name__)
        client = self._connect()
        timeout = self.config.default_timeout

        sql_normalized = " ".join(sql.split())
        span_description = sql_normalized[:100]
        log.debug("executing query", sql=sql_normalized, params=len(params))
        with sentry_sdk.start_span(op="db.query", description=span_description) as span:
            start_time = time.monotonic()
            try:
                result = client.sql.execute(sql, *params, timeout=timeout).result()
            except OperationTimeoutError as e:
                duration_ms = (time.monotonic() - start_time) * 1000
                span.set_data("duration_ms", duration_ms)
                span.set_status("deadline_exceeded")
                log.error(
                    "query timeout",
                    sql=sql_normalized,
                    duration_ms=f"{duration_ms:.1f}",
                )
                raise _map_error(e, timeout) from e
            except HazelcastSqlError as e:
                span.set_status("invalid_argument")
                log.error("query error", sql=sql_normalized, error=str(e))
                raise _map_error(e, timeout) from e
            except HazelcastError as e:
                span.set_status("unavailable")
                log.error("cluster error", sql=sql_normalized, error=str(e))
                raise _map_error(e, timeout) from e

            duration_ms = (time.monotonic() - start_time) * 1000
            span.set_data("duration_ms", duration_ms)
            log.debug("query submitted", duration_ms=f"{duration_ms:.1f}")
            return HzCursor(result, timeout)

    def server_version(self) -> str | None:
        """Version of the first cluster member, or None when unknown."""
        members = self._connect().cluster_service.get_members()
        if not members:
            return None
        version = members[0].version
        return f"{version.major}.{version.minor}.{version.patch}"

    def close(self) -> None:
        """Shut down the cluster client."""
        if self._client is not None:
            self._client.shutdown()
            self._client = None
