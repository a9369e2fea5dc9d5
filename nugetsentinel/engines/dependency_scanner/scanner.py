"""Inventory builder — discover declaration files and collect a deduplicated package set."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import structlog

# Ensure parsers are registered before any scan runs.
import nugetsentinel.engines.dependency_scanner.parsers  # noqa: F401
from nugetsentinel.engines.dependency_scanner.models import PackageRef, PackageSet
from nugetsentinel.engines.dependency_scanner.registry import discover_manifests
from nugetsentinel.exceptions import ScanRootNotFoundError, ScanTraversalError

log = structlog.get_logger("nugetsentinel.engine.scanner")


def scan(
    root: Path,
    on_manifest: Callable[[Path], None] | None = None,
) -> PackageSet:
    """Scan a local source tree for NuGet package references.

    *on_manifest* is called with each discovered declaration file before it
    is parsed. Parse and I/O errors propagate; a single corrupt file aborts
    the scan.
    """
    root = Path(root)
    if not root.is_dir():
        raise ScanRootNotFoundError(root)

    refs: list[PackageRef] = []
    for parser, file_path in discover_manifests(root):
        log.debug(
            "scanner.manifest_found",
            path=str(file_path),
            detection_method=parser.detection_method,
        )
        if on_manifest is not None:
            on_manifest(file_path)
        try:
            content = file_path.read_bytes()
        except OSError as exc:
            raise ScanTraversalError(f"cannot read {file_path}: {exc.strerror}") from exc
        parsed = parser.parse(file_path, content)
        log.debug("scanner.manifest_parsed", path=str(file_path), packages=len(parsed))
        refs.extend(parsed)

    packages = PackageSet.from_refs(refs)
    log.debug("scanner.deduplicated", declared=len(refs), unique=len(packages))
    return packages
