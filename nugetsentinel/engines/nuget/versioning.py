"""NuGet version parsing and comparison.

NuGet versions have one to four numeric parts, optional dot-separated
release labels after ``-`` and optional build metadata after ``+``.
Two versions are equal when their four numeric parts match (missing parts
are zero) and their release labels match case-insensitively; build
metadata is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_VERSION_RE = re.compile(
    rf"^(?P<numbers>\d+(?:\.\d+){{0,3}})"
    rf"(?:-(?P<release>{_IDENT}))?"
    rf"(?:\+(?P<metadata>{_IDENT}))?$"
)

_INT32_MAX = 2**31 - 1


class InvalidVersionError(ValueError):
    """Raised when a string is not a valid NuGet version."""


@dataclass(frozen=True)
class NuGetVersion:
    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    release_labels: tuple[str, ...] = ()
    metadata: str | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, value: str) -> NuGetVersion:
        text = (value or "").strip()
        m = _VERSION_RE.match(text)
        if m is None:
            raise InvalidVersionError(f"{value!r} is not a valid NuGet version")

        numbers = [int(part) for part in m.group("numbers").split(".")]
        if any(n > _INT32_MAX for n in numbers):
            raise InvalidVersionError(f"{value!r} has a version part out of range")
        numbers += [0] * (4 - len(numbers))

        release = m.group("release")
        return cls(
            major=numbers[0],
            minor=numbers[1],
            patch=numbers[2],
            revision=numbers[3],
            release_labels=tuple(release.split(".")) if release else (),
            metadata=m.group("metadata"),
        )

    @classmethod
    def try_parse(cls, value: str | None) -> NuGetVersion | None:
        if value is None:
            return None
        try:
            return cls.parse(value)
        except InvalidVersionError:
            return None

    @property
    def is_prerelease(self) -> bool:
        return bool(self.release_labels)

    @property
    def normalized(self) -> str:
        """Normalized string form as used by the NuGet gallery (no metadata)."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            text += f".{self.revision}"
        if self.release_labels:
            text += "-" + ".".join(self.release_labels)
        return text

    def _key(self) -> tuple:
        return (
            self.major,
            self.minor,
            self.patch,
            self.revision,
            tuple(label.lower() for label in self.release_labels),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self.metadata:
            return f"{self.normalized}+{self.metadata}"
        return self.normalized
