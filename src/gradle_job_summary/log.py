"""Logging that speaks the GitHub Actions workflow command syntax.

Modules log through ``logging.getLogger(__name__)``; :func:`configure_logging`
attaches an :class:`ActionsLogHandler` to the package logger so that debug,
warning and error records become ``::debug::``/``::warning::``/``::error::``
commands, while info records are printed as plain log lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "gradle_job_summary"


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsLogHandler(logging.StreamHandler):
    """Stream handler emitting one workflow command (or plain line) per record."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(stream if stream is not None else sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"::error::{_escape_data(message)}"
        if record.levelno >= logging.WARNING:
            return f"::warning::{_escape_data(message)}"
        if record.levelno >= logging.INFO:
            return message
        return f"::debug::{_escape_data(message)}"


def configure_logging(debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Route the package logger to an ActionsLogHandler.

    Calling this more than once replaces the previously installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, ActionsLogHandler):
            logger.removeHandler(handler)

    logger.addHandler(ActionsLogHandler(stream))
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger


def start_group(logger: logging.Logger, title: str) -> None:
    """Open a collapsible group in the job log."""
    logger.info("::group::%s", title)


def end_group(logger: logging.Logger) -> None:
    logger.info("::endgroup::")
