"""Shared test fixtures for hz-catalog."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
import structlog
from typer.testing import CliRunner

from hz_catalog.cli.main import app
from hz_catalog.core.executor import RawRow


class FakeCursor:
    """In-memory RawCursor; optionally fails after yielding some rows."""

    def __init__(self, rows, fail_after=None):
        self.rows = [RawRow(r) for r in rows]
        self.fail_after = fail_after
        self.closed = False

    def __iter__(self):
        for i, row in enumerate(self.rows):
            if self.fail_after is not None and i >= self.fail_after:
                raise RuntimeError("connection reset while reading rows")
            yield row
        if self.fail_after is not None and self.fail_after >= len(self.rows):
            raise RuntimeError("connection reset while reading rows")

    def close(self):
        self.closed = True


class FakeExecutor:
    """QueryExecutor that records calls and replays canned rows."""

    def __init__(self, rows=(), *, error=None, fail_after=None, version=None):
        self.rows = list(rows)
        self.error = error
        self.fail_after = fail_after
        self.version = version
        self.calls = []
        self.cursors = []

    def execute(self, sql, params=()):
        self.calls.append((sql, tuple(params)))
        if self.error is not None:
            raise self.error
        cursor = FakeCursor(self.rows, fail_after=self.fail_after)
        self.cursors.append(cursor)
        return cursor


class VersionedExecutor(FakeExecutor):
    def server_version(self):
        if isinstance(self.version, Exception):
            raise self.version
        return self.version


# Catalog rows for a single "person" table with two columns.
PERSON_TABLE_ROWS = [("hazelcast", "public", "person", "BASE TABLE")]
PERSON_COLUMN_ROWS = [
    ("hazelcast", "public", "person", "name", "VARCHAR", "true", 1),
    ("hazelcast", "public", "person", "age", "INTEGER", "false", 2),
]


@pytest.fixture
def runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_runner(runner):
    """Invoke the CLI app with the given arguments."""

    def invoke(*args: str, **kwargs):
        return runner.invoke(app, list(args), **kwargs)

    return invoke


@pytest.fixture
def temp_dir():
    """Temporary directory for test files."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration made by one test from leaking into others."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clean_hz_env(monkeypatch):
    """Keep developer environment variables out of config resolution."""
    for var in (
        "HZ_MEMBERS",
        "HZ_CLUSTER_NAME",
        "HZ_CONNECT_TIMEOUT",
        "HZ_CATALOG_PROFILE",
        "SENTRY_DSN",
    ):
        monkeypatch.delenv(var, raising=False)
