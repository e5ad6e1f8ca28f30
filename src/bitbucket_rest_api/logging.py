"""Logging for the Bitbucket client, built on loguru.

Client modules log through ``get_logger(__name__)``; request-level
messages carry the repository (and pull request) they concern.
``setup_logging`` installs one stderr sink and sends the httpx/httpcore
loggers through it, so transport chatter follows the same level.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger, Record

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# stdlib loggers used by the transport
HTTP_LOGGERS = ("httpx", "httpcore")

_FORMAT = (
    "<dim>{time:HH:mm:ss}</dim> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>{extra[context]} - "
    "<level>{message}</level>"
)

_configured = False


class _TransportLogHandler(logging.Handler):
    """Forward httpx/httpcore records to loguru under their logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.bind(name=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def _with_context(record: Record) -> bool:
    """Fill the fields the console format expects."""
    extra = record["extra"]
    extra.setdefault("name", record["name"])
    scope = [f"{key}={extra[key]}" for key in ("repo", "pull_request") if key in extra]
    extra["context"] = f" [{' '.join(scope)}]" if scope else ""
    return True


def setup_logging(level: LogLevel = "INFO", *, verbose: bool = False, quiet: bool = False) -> None:
    """Send client and transport logs to stderr.

    ``verbose`` forces DEBUG (including httpx request lines) and wins
    over ``quiet``, which forces WARNING.
    """
    global _configured

    effective: LogLevel = "DEBUG" if verbose else "WARNING" if quiet else level

    logger.remove()
    logger.add(sys.stderr, level=effective, format=_FORMAT, filter=_with_context)

    transport_level = logging.DEBUG if effective in ("TRACE", "DEBUG") else logging.WARNING
    handler = _TransportLogHandler()
    for name in HTTP_LOGGERS:
        transport_logger = logging.getLogger(name)
        transport_logger.handlers = [handler]
        transport_logger.propagate = False
        transport_logger.setLevel(transport_level)

    _configured = True


def get_logger(name: str) -> Logger:
    """Logger with ``name`` bound (typically the module's ``__name__``)."""
    return logger.bind(name=name)


def bind_repo(user: str, repo: str, **extra: Any) -> Logger:
    """Logger scoped to one repository."""
    return logger.bind(name="bitbucket", repo=f"{user}/{repo}", **extra)


def bind_pull_request(user: str, repo: str, pull_request_id: int | str) -> Logger:
    """Logger scoped to one pull request."""
    return bind_repo(user, repo, pull_request=pull_request_id)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks and transport handlers (used between tests)."""
    global _configured
    logger.remove()
    for name in HTTP_LOGGERS:
        transport_logger = logging.getLogger(name)
        transport_logger.handlers = []
        transport_logger.propagate = True
        transport_logger.setLevel(logging.NOTSET)
    _configured = False
