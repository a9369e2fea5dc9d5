"""Report event vocabulary shared by every reporting channel."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Info:
    text: str


@dataclass(frozen=True)
class Debug:
    text: str


@dataclass(frozen=True)
class Problem:
    """A build problem; *identity* is a stable key used to deduplicate problems."""

    identity: str
    description: str


@dataclass(frozen=True)
class StatusFailure:
    text: str


ReportEvent = Info | Debug | Problem | StatusFailure
