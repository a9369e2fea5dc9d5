"""NuGet registry engine — V3 metadata lookup and status resolution."""

from nugetsentinel.engines.nuget.client import NuGetClient, StatusResolver
from nugetsentinel.engines.nuget.models import PackageStatus
from nugetsentinel.engines.nuget.versioning import InvalidVersionError, NuGetVersion

__all__ = [
    "InvalidVersionError",
    "NuGetClient",
    "NuGetVersion",
    "PackageStatus",
    "StatusResolver",
]
