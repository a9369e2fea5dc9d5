"""Custom exceptions for nugetsentinel."""

from __future__ import annotations

from pathlib import Path


class NugetSentinelError(Exception):
    """Base exception for all scan errors."""


class ScanRootNotFoundError(NugetSentinelError):
    """Raised when the directory to scan does not exist."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"scan root {str(path)!r} does not exist or is not a directory")


class ManifestParseError(NugetSentinelError):
    """Raised when a declaration file is not well-formed XML."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot parse {self.path}: {reason}")


class ScanTraversalError(NugetSentinelError):
    """Raised when the source tree cannot be walked or a manifest cannot be read."""


class RegistryError(NugetSentinelError):
    """Raised when the package registry cannot be reached or answers with an error."""
