"""npm-range: NPM-style semver range parsing and matching.

The core is pure and reentrant: parse a formula, normalize it into
comparators, and check versions against it::

    >>> from npm_range import satisfies
    >>> satisfies("^1.2.3", "1.9.0")
    True
"""

from __future__ import annotations

from .cache import CompiledFormula, FormulaCache, compile_formula
from .config import ConfigError, Settings, load_settings
from .errors import SemverSyntaxError
from .models import (
    ANY,
    AnyPattern,
    ExprClause,
    Formula,
    HyphenRange,
    MajorPattern,
    MinorPattern,
    Op,
    PatternClause,
    SimpleRange,
    Spec,
    SpecClause,
    Version,
    compare,
)
from .normalize import Comparator, Normalized, normalize, to_formula
from .parsers import parse_formula, parse_version
from .printer import print_formula, print_normalized, print_version
from .satisfies import satisfies

__version__ = "0.1.0"

__all__ = [
    "ANY",
    "AnyPattern",
    "Comparator",
    "CompiledFormula",
    "ConfigError",
    "ExprClause",
    "Formula",
    "FormulaCache",
    "HyphenRange",
    "MajorPattern",
    "MinorPattern",
    "Normalized",
    "Op",
    "PatternClause",
    "SemverSyntaxError",
    "Settings",
    "SimpleRange",
    "Spec",
    "SpecClause",
    "Version",
    "compare",
    "compile_formula",
    "load_settings",
    "normalize",
    "parse_formula",
    "parse_version",
    "print_formula",
    "print_normalized",
    "print_version",
    "satisfies",
    "to_formula",
]
