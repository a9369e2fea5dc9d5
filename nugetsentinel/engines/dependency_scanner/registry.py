"""Parser registry — discover declaration files and match them to parsers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from nugetsentinel.engines.dependency_scanner.models import PackageRef
from nugetsentinel.exceptions import ScanTraversalError


@runtime_checkable
class ManifestParser(Protocol):
    """Interface that every declaration file parser must satisfy."""

    detection_method: str

    def matches(self, file_name: str) -> bool: ...

    def parse(self, file_path: Path, content: bytes | str) -> list[PackageRef]: ...


PARSER_REGISTRY: dict[str, ManifestParser] = {}


def register_parser(parser: ManifestParser) -> None:
    """Register a parser instance by its detection_method.

    Discovery visits parsers in registration order.
    """
    PARSER_REGISTRY[parser.detection_method] = parser


def _walk(root: Path) -> list[Path]:
    """Return every file below *root*, raising on any traversal error."""

    def _raise(err: OSError) -> None:
        raise ScanTraversalError(f"cannot traverse {err.filename}: {err.strerror}") from err

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            files.append(Path(dirpath) / name)
    return files


def discover_manifests(root: Path) -> list[tuple[ManifestParser, Path]]:
    """Walk *root* and match declaration files to registered parsers.

    Returns a list of (parser, matched_file) pairs, grouped by parser.
    """
    files = _walk(root)
    matches: list[tuple[ManifestParser, Path]] = []
    for parser in PARSER_REGISTRY.values():
        for path in files:
            if parser.matches(path.name) and path.is_file():
                matches.append((parser, path))
    return matches
