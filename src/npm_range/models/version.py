"""Semantic version value object and its precedence rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering
from typing import TypeAlias

Identifier: TypeAlias = int | str


def _identifier_key(ident: Identifier) -> tuple[int, int, str]:
    # Numeric identifiers always sort below alphanumeric ones.
    if isinstance(ident, int):
        return (0, ident, "")
    return (1, 0, ident)


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A ``major.minor.patch[-prerelease][+build]`` version.

    Equality, hashing and ordering follow semver precedence, so build
    metadata never takes part in a comparison.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of identifiers; store tuples so values stay hashable.
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError("Version components must be non-negative")
        if any(ident == "" for ident in self.prerelease + self.build):
            raise ValueError("Version identifiers must be non-empty")

    @classmethod
    def parse(cls, text: str) -> Version:
        from ..parsers.version import parse_version

        return parse_version(text)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def release(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def precedence_key(self) -> tuple[object, ...]:
        pre = tuple(_identifier_key(ident) for ident in self.prerelease)
        return (self.major, self.minor, self.patch, not self.prerelease, pre)

    def strip_build(self) -> Version:
        if not self.build:
            return self
        return replace(self, build=())

    def strip_prerelease(self) -> Version:
        if not self.prerelease:
            return self
        return replace(self, prerelease=())

    def next_major(self) -> Version:
        return Version(self.major + 1, 0, 0)

    def next_minor(self) -> Version:
        return Version(self.major, self.minor + 1, 0)

    def next_patch(self) -> Version:
        return Version(self.major, self.minor, self.patch + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key() == other.precedence_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key() < other.precedence_key()

    def __hash__(self) -> int:
        return hash(self.precedence_key())

    def __str__(self) -> str:
        from ..printer import print_version

        return print_version(self)


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to, or after ``b``."""
    left, right = a.precedence_key(), b.precedence_key()
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
