"""Data models for the auditor engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanOutcome:
    """Aggregate result of auditing a package set."""

    has_issues: bool
    flagged_count: int
    scanned_count: int = 0
