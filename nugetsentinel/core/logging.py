"""Logging bootstrap: structlog events rendered through stdlib ``logging``.

Records from structlog loggers and from plain stdlib loggers (httpx,
asyncio) share one pre-chain and a single stderr handler, so stdout stays
free for CI service messages.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog
from structlog.types import Processor

LEVEL_ENV = "NUGETSENTINEL_LOG_LEVEL"
FORMAT_ENV = "NUGETSENTINEL_LOG_FORMAT"

# One INFO line per HTTP request otherwise.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _stderr_handler(pre_chain: list[Processor], renderer: Processor) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def setup_logging(
    verbose: bool = False,
    *,
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Send every log record to stderr.

    *level* and *log_format* fall back to ``NUGETSENTINEL_LOG_LEVEL``
    (``INFO``) and ``NUGETSENTINEL_LOG_FORMAT`` (``console`` or ``json``).
    *verbose* forces ``DEBUG``. Calling it again replaces the handler
    installed by the previous call.
    """
    if verbose:
        level = "DEBUG"
    level = (level or os.environ.get(LEVEL_ENV) or "INFO").upper()
    log_format = (log_format or os.environ.get(FORMAT_ENV) or "console").lower()

    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(pre_chain, _renderer(log_format))]
    root.setLevel(level)
    logging.getLogger("nugetsentinel").setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
