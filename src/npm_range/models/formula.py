"""Abstract syntax tree for range formulas.

A formula is an OR of ranges. A range is either an AND of clauses or an
inclusive hyphen range. Clauses apply an optional operator to a version or a
partial-version pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .version import Version


class Op(Enum):
    """Comparison operators, valued by their source spelling."""

    EQ = "="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="


class Spec(Enum):
    """Range shorthand operators."""

    TILDE = "~"
    CARET = "^"


@dataclass(frozen=True, slots=True)
class AnyPattern:
    """``*``: any version."""


@dataclass(frozen=True, slots=True)
class MajorPattern:
    """``m.x.x``: any version with the given major."""

    major: int


@dataclass(frozen=True, slots=True)
class MinorPattern:
    """``m.n.x``: any version with the given major and minor."""

    major: int
    minor: int


ANY = AnyPattern()

Pattern: TypeAlias = AnyPattern | MajorPattern | MinorPattern
VersionOrPattern: TypeAlias = Version | Pattern


@dataclass(frozen=True, slots=True)
class PatternClause:
    """A bare version or pattern, e.g. ``1.2.3`` or ``1.x``."""

    target: VersionOrPattern


@dataclass(frozen=True, slots=True)
class SpecClause:
    """A tilde or caret range, e.g. ``~1.2.3`` or ``^1.2``."""

    spec: Spec
    target: VersionOrPattern


@dataclass(frozen=True, slots=True)
class ExprClause:
    """A comparator, e.g. ``>=1.2.3``."""

    op: Op
    target: VersionOrPattern


Clause: TypeAlias = PatternClause | SpecClause | ExprClause


@dataclass(frozen=True, slots=True)
class SimpleRange:
    """Space-separated clauses that must all hold."""

    clauses: tuple[Clause, ...]


@dataclass(frozen=True, slots=True)
class HyphenRange:
    """Inclusive ``lower - upper`` range."""

    lower: VersionOrPattern
    upper: VersionOrPattern


Range: TypeAlias = SimpleRange | HyphenRange


@dataclass(frozen=True)
class Formula:
    """``||``-separated ranges; satisfied when any one range is."""

    ranges: tuple[Range, ...]

    @classmethod
    def parse(cls, text: str) -> Formula:
        from ..parsers.formula import parse_formula

        return parse_formula(text)

    def __str__(self) -> str:
        from ..printer import print_formula

        return print_formula(self)


MATCH_ANY = Formula((SimpleRange((PatternClause(ANY),)),))
