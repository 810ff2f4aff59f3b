"""Render versions, formulas and normalized forms back to range syntax.

Output reparses to an equivalent formula but is not byte-identical to the
input: whitespace is canonicalised, ``v`` prefixes are dropped and patterns
are spelled ``1.x.x`` / ``1.2.x`` / ``*``.
"""

from __future__ import annotations

from typing import assert_never

from .models.formula import (
    AnyPattern,
    Clause,
    ExprClause,
    Formula,
    HyphenRange,
    MajorPattern,
    MinorPattern,
    Op,
    Pattern,
    PatternClause,
    Range,
    SimpleRange,
    SpecClause,
    VersionOrPattern,
)
from .models.version import Version
from .normalize import Normalized, to_formula


def print_version(version: Version) -> str:
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        text += "-" + ".".join(str(ident) for ident in version.prerelease)
    if version.build:
        text += "+" + ".".join(version.build)
    return text


def print_pattern(pattern: Pattern) -> str:
    if isinstance(pattern, AnyPattern):
        return "*"
    if isinstance(pattern, MajorPattern):
        return f"{pattern.major}.x.x"
    if isinstance(pattern, MinorPattern):
        return f"{pattern.major}.{pattern.minor}.x"
    assert_never(pattern)


def print_target(target: VersionOrPattern) -> str:
    if isinstance(target, Version):
        return print_version(target)
    return print_pattern(target)


def print_clause(clause: Clause) -> str:
    if isinstance(clause, PatternClause):
        return print_target(clause.target)
    if isinstance(clause, SpecClause):
        return clause.spec.value + print_target(clause.target)
    if isinstance(clause, ExprClause):
        # A bare pattern would reparse as an x-range, so only versions drop "=".
        if clause.op is Op.EQ and isinstance(clause.target, Version):
            return print_version(clause.target)
        return clause.op.value + print_target(clause.target)
    assert_never(clause)


def print_range(range_: Range) -> str:
    if isinstance(range_, HyphenRange):
        return f"{print_target(range_.lower)} - {print_target(range_.upper)}"
    if isinstance(range_, SimpleRange):
        return " ".join(print_clause(clause) for clause in range_.clauses)
    assert_never(range_)


def print_formula(formula: Formula) -> str:
    return " || ".join(print_range(range_) for range_ in formula.ranges)


def print_normalized(normalized: Normalized) -> str:
    """Render a DNF as comparators, e.g. ``>=1.2.3 <2.0.0 || 3.0.0``."""
    return print_formula(to_formula(normalized))
