"""Auditor engine — fold per-package registry verdicts into a scan outcome."""

from nugetsentinel.engines.auditor.aggregator import audit, problem_identity
from nugetsentinel.engines.auditor.models import ScanOutcome

__all__ = ["ScanOutcome", "audit", "problem_identity"]
