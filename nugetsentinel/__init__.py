"""NuGet dependency auditor — find deprecated and vulnerable package references."""

__version__ = "0.1.0"
