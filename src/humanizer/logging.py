"""Logging setup for the humanizer command and ``humanizer.*`` loggers.

Library code only ever calls :func:`get_logger`.  The ``humanizer`` logger
carries a ``NullHandler`` so nothing is printed unless the host application,
or the CLI through :func:`setup_logging`, configures it.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

_ROOT = "humanizer"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_MAX_LOG_BYTES = 1024 * 1024
_BACKUP_COUNT = 3

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def _file_handler(log_file: str) -> logging.Handler:
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(str(path), maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route ``humanizer`` log records to *stream* and, if given, *log_file*.

    *stream* defaults to stderr so logs never mix with the text written to
    stdout.  A rotating file handler is attached only when *log_file* is set
    (``--log-file``, ``HUMANIZER_LOG_FILE`` or ``log_file:`` in config).
    Calling this again replaces the previous handlers.
    """
    logger = logging.getLogger(_ROOT)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    fmt = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(_file_handler(log_file))
    for handler in handlers:
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``humanizer.<name>`` logger."""
    return logging.getLogger(f"{_ROOT}.{name}")
