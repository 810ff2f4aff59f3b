"""Value types for versions and range formulas."""

from __future__ import annotations

from .formula import (
    ANY,
    MATCH_ANY,
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
from .version import Identifier, Version, compare

__all__ = [
    "ANY",
    "MATCH_ANY",
    "AnyPattern",
    "Clause",
    "ExprClause",
    "Formula",
    "HyphenRange",
    "Identifier",
    "MajorPattern",
    "MinorPattern",
    "Op",
    "Pattern",
    "PatternClause",
    "Range",
    "SimpleRange",
    "Spec",
    "SpecClause",
    "Version",
    "VersionOrPattern",
    "compare",
]
