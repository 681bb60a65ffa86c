"""Tests for humanizer.logging: handler routing and logger names."""

from __future__ import annotations

import io
import logging
from logging.handlers import RotatingFileHandler

import pytest

from humanizer.logging import get_logger, setup_logging
from humanizer.strings import humanize


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("humanizer")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.WARNING)


def _stream_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def _file_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


class TestHandlerRouting:
    def test_stream_only_without_log_file(self):
        logger = setup_logging(stream=io.StringIO())
        assert len(_stream_handlers(logger)) == 1
        assert _file_handlers(logger) == []

    def test_no_log_directory_created_without_log_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        setup_logging(stream=io.StringIO())
        assert list(tmp_path.iterdir()) == []

    def test_defaults_to_stderr(self, capsys):
        setup_logging(level="INFO")
        get_logger("test.stderr").info("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_log_file_adds_rotating_handler(self, tmp_path):
        logger = setup_logging(log_file=str(tmp_path / "h.log"), stream=io.StringIO())
        assert len(_file_handlers(logger)) == 1
        assert len(_stream_handlers(logger)) == 1

    def test_log_file_parent_created(self, tmp_path):
        log_file = tmp_path / "nested" / "dir" / "h.log"
        setup_logging(log_file=str(log_file), stream=io.StringIO())
        assert log_file.parent.is_dir()

    def test_log_file_expands_user(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        setup_logging(log_file="~/logs/h.log", stream=io.StringIO())
        assert (tmp_path / "logs").is_dir()

    def test_records_reach_stream_and_file(self, tmp_path):
        stream = io.StringIO()
        log_file = tmp_path / "h.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), stream=stream)
        get_logger("test.write").info("hello from test")
        for h in logger.handlers:
            h.flush()
        line = "[INFO] humanizer.test.write: hello from test"
        assert line in stream.getvalue()
        assert line in log_file.read_text()

    def test_reconfigure_replaces_handlers(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "h.log"), stream=io.StringIO())
        logger = setup_logging(stream=io.StringIO())
        assert len(logger.handlers) == 1
        assert _file_handlers(logger) == []


class TestLevels:
    @pytest.mark.parametrize(
        "name,expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("BOGUS", logging.WARNING)],
    )
    def test_level_by_name(self, name, expected):
        logger = setup_logging(level=name, stream=io.StringIO())
        assert logger.level == expected

    def test_below_level_not_emitted(self):
        stream = io.StringIO()
        setup_logging(level="WARNING", stream=stream)
        get_logger("test.quiet").info("hidden")
        assert stream.getvalue() == ""


class TestGetLogger:
    def test_child_name(self):
        assert get_logger("test.module").name == "humanizer.test.module"

    def test_child_inherits_level(self):
        setup_logging(level="DEBUG", stream=io.StringIO())
        assert get_logger("test.inherit").getEffectiveLevel() == logging.DEBUG

    def test_library_records_propagate(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="humanizer"):
            humanize("")
        assert "empty input" in caplog.text
