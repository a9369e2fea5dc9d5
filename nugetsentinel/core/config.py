"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_NUGET_SOURCE = "https://api.nuget.org/v3/index.json"
DEFAULT_HTTP_TIMEOUT = 30.0

# Set by the TeamCity agent for every build step.
TEAMCITY_MARKER = "TEAMCITY_VERSION"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for a single scan run.

    Reads from environment variables:
        NUGETSENTINEL_NUGET_SOURCE  — service index URL (default: nuget.org v3)
        NUGETSENTINEL_HTTP_TIMEOUT  — registry request timeout in seconds (default: 30)
        TEAMCITY_VERSION            — presence enables TeamCity service messages
    """

    nuget_source: str = DEFAULT_NUGET_SOURCE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    teamcity: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        source = env.get("NUGETSENTINEL_NUGET_SOURCE", "").strip() or DEFAULT_NUGET_SOURCE
        timeout_raw = env.get("NUGETSENTINEL_HTTP_TIMEOUT", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
        except ValueError:
            raise ValueError(
                f"NUGETSENTINEL_HTTP_TIMEOUT must be a number of seconds, got {timeout_raw!r}"
            ) from None
        return cls(
            nuget_source=source,
            http_timeout=timeout,
            teamcity=TEAMCITY_MARKER in env,
        )
