"""Decide whether a version satisfies a range formula."""

from __future__ import annotations

from typing import assert_never

from .models.formula import Formula, Op
from .models.version import Version
from .normalize import Comparator, Conjunction, Normalized, normalize
from .parsers.formula import parse_formula
from .parsers.version import parse_version


def check_comparator(version: Version, comparator: Comparator) -> bool:
    op, bound = comparator
    if op is Op.EQ:
        return version == bound
    if op is Op.LT:
        return version < bound
    if op is Op.LTE:
        return version <= bound
    if op is Op.GT:
        return version > bound
    if op is Op.GTE:
        return version >= bound
    assert_never(op)


def _allows_prerelease(conjunction: Conjunction, version: Version) -> bool:
    # A prerelease only matches a branch that names a prerelease of the same
    # major.minor.patch, so ">=1.2.3-alpha" admits 1.2.3-beta but not 1.2.4-alpha.
    return any(
        bound.is_prerelease and bound.release == version.release
        for _op, bound in conjunction
    )


def satisfies_normalized(normalized: Normalized, version: Version) -> bool:
    """Evaluate an already-normalized formula against ``version``."""
    version = version.strip_build()
    if not version.is_prerelease:
        return any(
            all(check_comparator(version, c) for c in conjunction)
            for conjunction in normalized
        )
    return any(
        _allows_prerelease(conjunction, version)
        and all(check_comparator(version, c) for c in conjunction)
        for conjunction in normalized
    )


def satisfies(formula: Formula | str, version: Version | str) -> bool:
    """Return True when ``version`` falls within ``formula``.

    Either argument may be given as source text, in which case it is parsed
    first and any ``SemverSyntaxError`` propagates to the caller.
    """
    if isinstance(formula, str):
        formula = parse_formula(formula)
    if isinstance(version, str):
        version = parse_version(version)
    return satisfies_normalized(normalize(formula), version)
