"""Data models for the dependency scanner engine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class PackageRef:
    """A package identity/version pair declared in a manifest file.

    Equality is exact and case-sensitive on both fields.
    """

    id: str
    version: str

    def __str__(self) -> str:
        return f"{self.id} {self.version}"


class PackageSet:
    """Immutable, deduplicated collection of :class:`PackageRef`.

    Iteration yields entries in first-seen order.
    """

    __slots__ = ("_refs",)

    def __init__(self, refs: Iterable[PackageRef] = ()) -> None:
        # dict keys keep insertion order and collapse duplicates
        self._refs: tuple[PackageRef, ...] = tuple(dict.fromkeys(refs))

    @classmethod
    def from_refs(cls, refs: Iterable[PackageRef]) -> PackageSet:
        return cls(refs)

    def __iter__(self) -> Iterator[PackageRef]:
        return iter(self._refs)

    def __len__(self) -> int:
        return len(self._refs)

    def __contains__(self, item: object) -> bool:
        return item in self._refs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageSet):
            return NotImplemented
        return set(self._refs) == set(other._refs)

    def __hash__(self) -> int:
        return hash(frozenset(self._refs))

    def __repr__(self) -> str:
        return f"PackageSet({list(self._refs)!r})"
