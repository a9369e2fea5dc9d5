"""CLI entry point: nugetsentinel.

Usage:
    nugetsentinel -f /path/to/solution
    nugetsentinel -f . --source https://nuget.example.com/v3/index.json
    python -m nugetsentinel -f /path/to/solution -v

Exit codes:
    0   no deprecated or vulnerable packages
    10  directory to scan does not exist
    20  one or more packages are deprecated or vulnerable
    30  scan failed (parse, filesystem or registry error)
"""

from __future__ import annotations

import asyncio
import dataclasses
import socket
import sys
from enum import IntEnum
from pathlib import Path

import click
import structlog

from nugetsentinel import __version__
from nugetsentinel.core.config import Settings
from nugetsentinel.core.logging import setup_logging
from nugetsentinel.engines.auditor import ScanOutcome, audit
from nugetsentinel.engines.dependency_scanner import scan
from nugetsentinel.engines.nuget import NuGetClient
from nugetsentinel.engines.reporting import (
    Debug,
    Info,
    LogChannel,
    ReportChannel,
    ReportDispatcher,
    TeamCityChannel,
)
from nugetsentinel.exceptions import ScanRootNotFoundError

log = structlog.get_logger("nugetsentinel.cli")


class ExitCode(IntEnum):
    SUCCESS = 0
    SCAN_ROOT_NOT_FOUND = 10
    DEPRECATED_OR_VULNERABLE = 20
    ERROR = 30


def build_channels(settings: Settings) -> list[ReportChannel]:
    """Pick reporting channels for this environment; the log channel is always on."""
    channels: list[ReportChannel] = [LogChannel()]
    if settings.teamcity:
        channels.append(TeamCityChannel())
    return channels


async def run_scan(root: Path, settings: Settings, dispatcher: ReportDispatcher) -> ScanOutcome:
    """Inventory *root*, audit every unique package and return the outcome."""
    packages = scan(root, on_manifest=lambda path: dispatcher.dispatch(Debug(f"Found: {path}")))
    dispatcher.dispatch(Info(f"Found {len(packages)} unique packages."))

    async with NuGetClient(settings.nuget_source, timeout=settings.http_timeout) as client:
        outcome = await audit(packages, client, dispatcher)

    dispatcher.dispatch(Info("Scan complete."))
    return outcome


def exit_code_for(outcome: ScanOutcome) -> ExitCode:
    return ExitCode.DEPRECATED_OR_VULNERABLE if outcome.has_issues else ExitCode.SUCCESS


@click.command()
@click.option(
    "-f",
    "--file-path",
    "file_path",
    required=True,
    type=click.Path(path_type=Path),
    help="Path to the project or solution directory to scan",
)
@click.option("--source", default=None, help="NuGet V3 service index URL")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.version_option(__version__, prog_name="nugetsentinel")
def main(file_path: Path, source: str | None, verbose: bool) -> None:
    """Report deprecated and vulnerable NuGet packages referenced below a directory."""
    setup_logging(verbose)
    host = socket.gethostname()

    try:
        settings = Settings.from_env()
        if source:
            settings = dataclasses.replace(settings, nuget_source=source)
        dispatcher = ReportDispatcher(build_channels(settings))
        dispatcher.dispatch(Info(f"Scanning {file_path} on {host}"))

        if not file_path.is_dir():
            raise ScanRootNotFoundError(file_path)

        outcome = asyncio.run(run_scan(file_path.resolve(), settings, dispatcher))
    except ScanRootNotFoundError as exc:
        log.error("scan.root_not_found", path=str(exc.path), host=host)
        sys.exit(ExitCode.SCAN_ROOT_NOT_FOUND)
    except Exception:
        log.error("scan.failed", path=str(file_path), exc_info=True)
        sys.exit(ExitCode.ERROR)

    sys.exit(exit_code_for(outcome))


if __name__ == "__main__":
    main()
