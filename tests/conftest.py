"""Shared test configuration and fixtures."""

import io
import logging

import pytest

from tprint.table.table import Table


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TPRINT_* variables from the developer's shell out of the tests."""
    for name in ("TPRINT_CONFIG", "TPRINT_BORDERS", "TPRINT_SPACES_LEFT",
                 "TPRINT_SPACES_BETWEEN", "TPRINT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def make_table(sink):
    """Build a table writing to the shared StringIO sink."""

    def _make(**kwargs):
        options = {"show_borders": False, "show_header": True, "spaces_left": 0, "spaces_between": 2}
        options.update(kwargs)
        return Table(sink, **options)

    return _make


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers the CLI attached to the 'tprint' logger."""
    yield
    logger = logging.getLogger("tprint")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
