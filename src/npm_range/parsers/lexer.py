"""Tokenizer for range formulas.

Whitespace is classified by context: around ``||`` it is absorbed, around a
lone ``-`` it forms the hyphen-range dash, after an operator it is dropped,
and between two clauses it becomes an ``AND`` token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import LEXICAL, SemverSyntaxError

OR = "OR"
AND = "AND"
DASH = "DASH"
OP = "OP"
SPEC = "SPEC"
V = "V"
NUM = "NUM"
DOT = "DOT"
WILDCARD = "WILDCARD"
PRE = "PRE"
BUILD = "BUILD"
EOF = "EOF"

_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

# Order matters: multi-character operators before their prefixes, and the
# whitespace-carrying OR/DASH rules before plain whitespace.
_RULES: list[tuple[str, re.Pattern[str]]] = [
    (OR, re.compile(r"\s*\|\|\s*")),
    (DASH, re.compile(r"\s+-\s+")),
    (AND, re.compile(r"\s+")),
    (OP, re.compile(r">=|<=|>|<|=")),
    (SPEC, re.compile(r"[~^]")),
    (NUM, re.compile(r"[0-9]+")),
    (DOT, re.compile(r"\.")),
    (WILDCARD, re.compile(r"[xX*]")),
    (V, re.compile(r"[vV]")),
]

# Only recognised directly after the last number of a version.
_PRE_RE = re.compile(r"-" + _IDENTIFIERS)
_BUILD_RE = re.compile(r"\+" + _IDENTIFIERS)

_ABSORBS_FOLLOWING_SPACE = {OP, SPEC, OR, DASH}


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    text: str
    pos: int


def _match_rule(src: str, pos: int, prev: str | None) -> tuple[str, str] | None:
    if prev in (NUM, PRE):
        for kind, pattern in ((PRE, _PRE_RE), (BUILD, _BUILD_RE)):
            if kind == PRE and prev == PRE:
                continue
            m = pattern.match(src, pos)
            if m:
                return kind, m.group(0)
    for kind, pattern in _RULES:
        m = pattern.match(src, pos)
        if m:
            return kind, m.group(0)
    return None


def tokenize(src: str) -> list[Token]:
    """Split ``src`` into tokens, always ending with an ``EOF`` token.

    Raises:
        SemverSyntaxError: if a character starts no token.
    """
    tokens: list[Token] = []
    pos = 0
    prev: str | None = None

    while pos < len(src):
        matched = _match_rule(src, pos, prev)
        if matched is None:
            raise SemverSyntaxError(
                src,
                f"unexpected character {src[pos]!r} at position {pos}",
                kind=LEXICAL,
            )
        kind, text = matched
        start = pos
        pos += len(text)

        if kind == AND and (prev is None or prev in _ABSORBS_FOLLOWING_SPACE or pos == len(src)):
            continue
        tokens.append(Token(kind, text, start))
        prev = kind

    tokens.append(Token(EOF, "", len(src)))
    return tokens
