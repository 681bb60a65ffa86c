"""Shared test fixtures."""

from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest

from humanizer.culture import Culture, set_current_culture


@pytest.fixture(autouse=True, scope="session")
def _isolate_logging():
    """Keep CLI log output off the real stderr.

    ``CliRunner`` swaps ``sys.stderr`` per invocation, so a stream handler
    attached during one test would point at a closed stream in the next.
    The CLI's ``setup_logging`` gets a throwaway buffer instead; any
    ``log_file`` is passed through unchanged.
    """
    import humanizer.cli as _cli

    _real_setup = _cli.setup_logging

    def _test_setup(level="WARNING", log_file=None, stream=None):
        return _real_setup(level=level, log_file=log_file, stream=io.StringIO())

    with patch.object(_cli, "setup_logging", _test_setup):
        logger = logging.getLogger("humanizer")
        logger.handlers.clear()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        yield


@pytest.fixture(autouse=True)
def _invariant_culture(monkeypatch):
    """Run every test under the invariant culture with no HUMANIZER_* overrides."""
    for var in (
        "HUMANIZER_CULTURE",
        "HUMANIZER_DEFAULT_CASING",
        "HUMANIZER_CONFIG",
        "HUMANIZER_LOG_LEVEL",
        "HUMANIZER_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    set_current_culture(Culture.invariant())
    yield
    set_current_culture(Culture.invariant())
