"""Reporting channels — destinations for report events."""

from __future__ import annotations

import sys
from typing import IO, Protocol, runtime_checkable

import structlog

from nugetsentinel.engines.reporting.events import (
    Debug,
    Info,
    Problem,
    ReportEvent,
    StatusFailure,
)
from nugetsentinel.engines.reporting.teamcity import format_service_message


@runtime_checkable
class ReportChannel(Protocol):
    """Interface that every reporting channel must satisfy."""

    name: str

    def deliver(self, event: ReportEvent) -> None: ...


class LogChannel:
    """Human-readable channel backed by structlog."""

    name = "log"

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._log = logger or structlog.get_logger("nugetsentinel.report")

    def deliver(self, event: ReportEvent) -> None:
        if isinstance(event, Info):
            self._log.info(event.text)
        elif isinstance(event, Debug):
            self._log.debug(event.text)
        elif isinstance(event, Problem):
            self._log.warning(event.description, identity=event.identity)
        elif isinstance(event, StatusFailure):
            self._log.error(event.text)
        else:
            raise TypeError(f"unsupported report event: {event!r}")


class TeamCityChannel:
    """TeamCity service message channel (``##teamcity[...]`` lines on stdout)."""

    name = "teamcity"

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    def deliver(self, event: ReportEvent) -> None:
        # Resolve stdout lazily so redirection after construction is honoured.
        stream = self._stream or sys.stdout
        stream.write(format_service_message(event) + "\n")
        stream.flush()
