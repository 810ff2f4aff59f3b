"""Parsers for versions and range formulas."""

from __future__ import annotations

from .formula import parse_formula
from .lexer import Token, tokenize
from .version import parse_version

__all__ = [
    "Token",
    "parse_formula",
    "parse_version",
    "tokenize",
]
