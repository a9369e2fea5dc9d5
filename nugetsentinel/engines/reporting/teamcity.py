"""TeamCity service message formatting.

See https://www.jetbrains.com/help/teamcity/service-messages.html
"""

from __future__ import annotations

from nugetsentinel.engines.reporting.events import (
    Debug,
    Info,
    Problem,
    ReportEvent,
    StatusFailure,
)

# Order matters: "|" must be doubled before substitutions that introduce "|".
_ESCAPES = (
    ("|", "||"),
    ("'", "|'"),
    ("\n", "|n"),
    ("\r", "|r"),
    ("[", "|["),
    ("]", "|]"),
)


def escape(value: str | None) -> str:
    """Escape a value for use inside a service message attribute."""
    if not value:
        return ""
    for char, replacement in _ESCAPES:
        value = value.replace(char, replacement)
    return value


def service_message(name: str, **attrs: str | None) -> str:
    body = " ".join(f"{key}='{escape(val)}'" for key, val in attrs.items())
    return f"##teamcity[{name} {body}]"


def format_service_message(event: ReportEvent) -> str:
    """Serialize a report event into a single-line service message."""
    if isinstance(event, (Info, Debug)):
        return service_message("message", text=event.text, status="NORMAL")
    if isinstance(event, Problem):
        return service_message(
            "buildProblem", description=event.description, identity=event.identity
        )
    if isinstance(event, StatusFailure):
        return service_message("buildStatus", status="FAILURE", text=event.text)
    raise TypeError(f"unsupported report event: {event!r}")
