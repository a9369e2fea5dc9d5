"""Fan-out of report events to every registered channel."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from nugetsentinel.engines.reporting.channels import ReportChannel
from nugetsentinel.engines.reporting.events import ReportEvent

log = structlog.get_logger("nugetsentinel.engine.reporting")


class ReportDispatcher:
    """Broadcast events to channels in registration order.

    A channel that raises is logged and skipped; the remaining channels
    still receive the event.
    """

    def __init__(self, channels: Iterable[ReportChannel] = ()) -> None:
        self.channels: list[ReportChannel] = list(channels)

    def register(self, channel: ReportChannel) -> None:
        self.channels.append(channel)

    def dispatch(self, event: ReportEvent) -> None:
        for channel in self.channels:
            try:
                channel.deliver(event)
            except Exception:
                log.warning(
                    "reporting.channel_failed",
                    channel=getattr(channel, "name", type(channel).__name__),
                    event_type=type(event).__name__,
                    exc_info=True,
                )
