"""Reporting engine — event vocabulary, channels and fan-out."""

from nugetsentinel.engines.reporting.channels import LogChannel, ReportChannel, TeamCityChannel
from nugetsentinel.engines.reporting.dispatcher import ReportDispatcher
from nugetsentinel.engines.reporting.events import (
    Debug,
    Info,
    Problem,
    ReportEvent,
    StatusFailure,
)

__all__ = [
    "Debug",
    "Info",
    "LogChannel",
    "Problem",
    "ReportChannel",
    "ReportDispatcher",
    "ReportEvent",
    "StatusFailure",
    "TeamCityChannel",
]
