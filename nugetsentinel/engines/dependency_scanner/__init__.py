"""Dependency scanner engine — inventory NuGet references from declaration files."""

from nugetsentinel.engines.dependency_scanner.models import PackageRef, PackageSet
from nugetsentinel.engines.dependency_scanner.scanner import scan

__all__ = ["PackageRef", "PackageSet", "scan"]
