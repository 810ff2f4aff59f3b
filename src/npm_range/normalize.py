"""Desugar range formulas into disjunctive normal form.

Each range of a formula becomes one conjunction of ``(op, version)``
comparators. Caret, tilde, hyphen and x-range sugar is expanded here, and this
is the single place build metadata is stripped from bound versions.

Examples::

    ^1.2.3        -> >=1.2.3 <2.0.0
    ^0.2.3        -> >=0.2.3 <0.3.0
    ~1.2          -> >=1.2.0 <1.3.0
    1.x           -> >=1.0.0 <2.0.0
    1.2.3 - 2.x   -> >=1.2.3 <3.0.0
    >1.2          -> >=1.3.0
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias, assert_never

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
    Spec,
    SpecClause,
    VersionOrPattern,
)
from .models.version import Version

ZERO = Version(0, 0, 0)


class Comparator(NamedTuple):
    op: Op
    version: Version


Conjunction: TypeAlias = tuple[Comparator, ...]
Normalized: TypeAlias = tuple[Conjunction, ...]


def pattern_floor(pattern: Pattern) -> Version:
    """Lowest version a pattern matches: ``1.x`` -> ``1.0.0``."""
    if isinstance(pattern, AnyPattern):
        return ZERO
    if isinstance(pattern, MajorPattern):
        return Version(pattern.major, 0, 0)
    if isinstance(pattern, MinorPattern):
        return Version(pattern.major, pattern.minor, 0)
    assert_never(pattern)


def pattern_ceiling(pattern: MajorPattern | MinorPattern) -> Version:
    """First version past a pattern: ``1.2.x`` -> ``1.3.0``."""
    if isinstance(pattern, MajorPattern):
        return Version(pattern.major + 1, 0, 0)
    if isinstance(pattern, MinorPattern):
        return Version(pattern.major, pattern.minor + 1, 0)
    assert_never(pattern)


def _floor(target: VersionOrPattern) -> Version:
    if isinstance(target, Version):
        return target.strip_build()
    return pattern_floor(target)


def _hyphen(lower: VersionOrPattern, upper: VersionOrPattern) -> list[Comparator]:
    bounds: list[Comparator] = []
    if not isinstance(lower, AnyPattern):
        bounds.append(Comparator(Op.GTE, _floor(lower)))

    if isinstance(upper, Version):
        bounds.append(Comparator(Op.LTE, upper.strip_build()))
    elif isinstance(upper, (MajorPattern, MinorPattern)):
        bounds.append(Comparator(Op.LT, pattern_ceiling(upper)))

    if not bounds:
        bounds.append(Comparator(Op.GTE, ZERO))
    return bounds


def _expr(op: Op, target: VersionOrPattern) -> Comparator:
    if isinstance(target, Version):
        return Comparator(op, target.strip_build())
    if op is not Op.GT:
        # <* means <0.0.0 and matches nothing; <1.2 means <1.2.0.
        return Comparator(op, pattern_floor(target))
    if isinstance(target, AnyPattern):
        # Nothing is greater than every version.
        return Comparator(Op.LT, ZERO)
    return Comparator(Op.GTE, pattern_ceiling(target))


def _tilde(target: VersionOrPattern) -> list[Comparator]:
    lower = Comparator(Op.GTE, _floor(target))
    if isinstance(target, AnyPattern):
        # ~* means >=0.0.0 <0.0.0, like <* it matches nothing.
        return [lower, Comparator(Op.LT, ZERO)]
    if isinstance(target, MajorPattern):
        # ~1 means >=1.0.0 <2.0.0
        return [lower, Comparator(Op.LT, pattern_ceiling(target))]
    return [lower, Comparator(Op.LT, lower.version.next_minor())]


def _caret(target: VersionOrPattern) -> list[Comparator]:
    floor = _floor(target)
    lower = Comparator(Op.GTE, floor)

    if isinstance(target, Version):
        if target.major == 0 and target.minor == 0:
            upper = floor.next_patch()
        elif target.major == 0:
            upper = floor.next_minor()
        else:
            upper = floor.next_major()
    elif isinstance(target, AnyPattern):
        return [lower]
    elif isinstance(target, MajorPattern):
        upper = floor.next_major()
    elif isinstance(target, MinorPattern):
        upper = floor.next_minor() if target.major == 0 else floor.next_major()
    else:
        assert_never(target)

    return [lower, Comparator(Op.LT, upper)]


def _x_range(target: VersionOrPattern) -> list[Comparator]:
    if isinstance(target, Version):
        return [Comparator(Op.EQ, target.strip_build())]
    lower = Comparator(Op.GTE, pattern_floor(target))
    if isinstance(target, AnyPattern):
        return [lower]
    return [lower, Comparator(Op.LT, pattern_ceiling(target))]


def _clause(clause: Clause) -> list[Comparator]:
    if isinstance(clause, ExprClause):
        return [_expr(clause.op, clause.target)]
    if isinstance(clause, SpecClause):
        if clause.spec is Spec.TILDE:
            return _tilde(clause.target)
        if clause.spec is Spec.CARET:
            return _caret(clause.target)
        assert_never(clause.spec)
    if isinstance(clause, PatternClause):
        return _x_range(clause.target)
    assert_never(clause)


def normalize_range(range_: Range) -> Conjunction:
    if isinstance(range_, HyphenRange):
        return tuple(_hyphen(range_.lower, range_.upper))
    if isinstance(range_, SimpleRange):
        return tuple(comparator for clause in range_.clauses for comparator in _clause(clause))
    assert_never(range_)


def normalize(formula: Formula) -> Normalized:
    """Return the DNF of ``formula``: one conjunction per ``||`` branch."""
    return tuple(normalize_range(range_) for range_ in formula.ranges)


def to_formula(normalized: Normalized) -> Formula:
    """Rebuild a printable formula of plain comparators from a DNF."""
    return Formula(
        tuple(
            SimpleRange(tuple(ExprClause(op, version) for op, version in conjunction))
            for conjunction in normalized
        )
    )
