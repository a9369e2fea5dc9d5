"""Declaration file parsers — auto-registered on import.

Registration order is discovery order: packages.config files first.
"""

from nugetsentinel.engines.dependency_scanner.parsers import (  # isort: skip
    packages_config,  # noqa: F401
    msbuild_project,  # noqa: F401
)
