"""Auditor — resolve every package's registry status and report the findings."""

from __future__ import annotations

import hashlib
import re
from collections.abc import Iterable

import structlog

from nugetsentinel.engines.auditor.models import ScanOutcome
from nugetsentinel.engines.dependency_scanner.models import PackageRef
from nugetsentinel.engines.nuget.client import StatusResolver
from nugetsentinel.engines.nuget.models import PackageStatus
from nugetsentinel.engines.reporting.dispatcher import ReportDispatcher
from nugetsentinel.engines.reporting.events import Info, Problem, StatusFailure

log = structlog.get_logger("nugetsentinel.engine.auditor")

PROBLEM_PREFIX = "nugetsentinel"

# TeamCity takes a Java identifier of at most 60 characters.
MAX_IDENTITY_LENGTH = 60
_DIGEST_LENGTH = 8
_UNSAFE_RE = re.compile(r"[^a-z0-9_]")


def problem_identity(ref: PackageRef) -> str:
    """Build the stable, lowercase problem identity for *ref*.

    Characters outside ``[a-z0-9_]`` become ``_``. Whenever that or the
    lowercasing changed the raw ``nugetsentinel_<id>_<version>`` text, or
    the result is longer than :data:`MAX_IDENTITY_LENGTH`, the slug is cut to
    fit and suffixed with a digest of the raw text, so case variants and
    references that sanitise alike still get different identities.
    """
    raw = f"{PROBLEM_PREFIX}_{ref.id}_{ref.version}"
    slug = _UNSAFE_RE.sub("_", raw.lower())
    if slug == raw and len(slug) <= MAX_IDENTITY_LENGTH:
        return slug
    digest = hashlib.sha1(raw.encode("utf-8")).hexdigest()[:_DIGEST_LENGTH]
    return f"{slug[: MAX_IDENTITY_LENGTH - _DIGEST_LENGTH - 1]}_{digest}"


def describe_status(ref: PackageRef, status: PackageStatus) -> str:
    tags = []
    if status.vulnerable:
        tags.append("[VULNERABLE]")
    if status.deprecated:
        tags.append("[DEPRECATED]")
    return f"{ref.id} {ref.version} => {' '.join(tags)}".rstrip()


def describe_problem(ref: PackageRef, status: PackageStatus) -> str:
    reasons = []
    if status.vulnerable:
        reasons.append("vulnerable")
    if status.deprecated:
        reasons.append("deprecated")
    return f"{ref.id} {ref.version} is {' and '.join(reasons)}"


async def audit(
    packages: Iterable[PackageRef],
    resolver: StatusResolver,
    dispatcher: ReportDispatcher,
) -> ScanOutcome:
    """Resolve each package in turn and emit per-package report events.

    Lookups run one at a time, so events follow the iteration order of
    *packages*. Registry errors propagate.
    """
    has_issues = False
    flagged = 0
    scanned = 0

    for ref in packages:
        status = await resolver.resolve_status(ref)
        scanned += 1
        dispatcher.dispatch(Info(describe_status(ref, status)))

        if status.flagged:
            has_issues = True
            flagged += 1
            dispatcher.dispatch(
                Problem(identity=problem_identity(ref), description=describe_problem(ref, status))
            )

    if has_issues:
        dispatcher.dispatch(
            StatusFailure(f"{flagged} package(s) are vulnerable or deprecated")
        )

    log.debug("auditor.completed", scanned=scanned, flagged=flagged)
    return ScanOutcome(has_issues=has_issues, flagged_count=flagged, scanned_count=scanned)
