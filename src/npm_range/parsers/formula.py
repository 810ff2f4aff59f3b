"""Recursive-descent parser for NPM-style range formulas.

Grammar::

    formula := range ("||" range)*
    range   := clause (AND clause)* | target DASH target
    clause  := target | OP target | SPEC target
    target  := [v] part ("." part ("." part [PRE] [BUILD])?)?
    part    := NUM | "x" | "X" | "*"
"""

from __future__ import annotations

from ..errors import SemverSyntaxError
from ..models.formula import (
    ANY,
    MATCH_ANY,
    Clause,
    ExprClause,
    Formula,
    HyphenRange,
    MajorPattern,
    MinorPattern,
    Op,
    PatternClause,
    Range,
    SimpleRange,
    Spec,
    SpecClause,
    VersionOrPattern,
)
from ..models.version import Identifier, Version
from .lexer import (
    AND,
    BUILD,
    DASH,
    DOT,
    EOF,
    NUM,
    OP,
    OR,
    PRE,
    SPEC,
    V,
    WILDCARD,
    Token,
    tokenize,
)


def _describe(token: Token) -> str:
    if token.kind == EOF:
        return "end of input"
    if token.kind == AND:
        return f"whitespace at position {token.pos}"
    return f"{token.text.strip()!r} at position {token.pos}"


def _prerelease(text: str) -> tuple[Identifier, ...]:
    return tuple(int(ident) if ident.isdigit() else ident for ident in text.split("."))


class Parser:
    """Single-use parser over the tokens of one source string."""

    def __init__(self, source: str, *, label: str = "invalid formula") -> None:
        self.source = source
        self.label = label
        self.tokens = tokenize(source)
        self.index = 0

    def peek(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind != EOF:
            self.index += 1
        return token

    def fail(self, token: Token, detail: str | None = None) -> SemverSyntaxError:
        reason = f"{self.label}: unexpected {_describe(token)}"
        if detail:
            reason = f"{reason} ({detail})"
        return SemverSyntaxError(self.source, reason)

    def expect_end(self) -> None:
        token = self.peek()
        if token.kind != EOF:
            raise self.fail(token)

    def formula(self) -> Formula:
        if self.peek().kind == EOF:
            return MATCH_ANY

        ranges = [self.range()]
        while self.peek().kind == OR:
            self.advance()
            ranges.append(self.range())
        self.expect_end()
        return Formula(tuple(ranges))

    def range(self) -> Range:
        if self.peek().kind in (OP, SPEC):
            first = self.clause()
        else:
            target = self.target()
            if self.peek().kind == DASH:
                self.advance()
                return HyphenRange(target, self.target())
            first = PatternClause(target)

        clauses: list[Clause] = [first]
        while self.peek().kind == AND:
            self.advance()
            clauses.append(self.clause())
        return SimpleRange(tuple(clauses))

    def clause(self) -> Clause:
        token = self.peek()
        if token.kind == OP:
            self.advance()
            return ExprClause(Op(token.text), self.target())
        if token.kind == SPEC:
            self.advance()
            return SpecClause(Spec(token.text), self.target())
        return PatternClause(self.target())

    def _part(self) -> int | None:
        token = self.advance()
        if token.kind == NUM:
            return int(token.text)
        if token.kind == WILDCARD:
            return None
        raise self.fail(token, "expected a number or wildcard")

    def target(self) -> VersionOrPattern:
        if self.peek().kind == V:
            self.advance()

        parts = [self._part()]
        while self.peek().kind == DOT and len(parts) < 3:
            self.advance()
            parts.append(self._part())

        wildcard_seen = False
        for part in parts:
            if part is None:
                wildcard_seen = True
            elif wildcard_seen:
                raise self.fail(self.tokens[self.index - 1], "number after wildcard")

        numbers = [part for part in parts if part is not None]
        if len(numbers) == 3:
            prerelease: tuple[Identifier, ...] = ()
            build: tuple[str, ...] = ()
            if self.peek().kind == PRE:
                prerelease = _prerelease(self.advance().text[1:])
            if self.peek().kind == BUILD:
                build = tuple(self.advance().text[1:].split("."))
            return Version(numbers[0], numbers[1], numbers[2], prerelease, build)

        if self.peek().kind in (PRE, BUILD):
            raise self.fail(self.peek(), "prerelease and build need a full version")
        if len(numbers) == 2:
            return MinorPattern(numbers[0], numbers[1])
        if len(numbers) == 1:
            return MajorPattern(numbers[0])
        return ANY


def parse_formula(text: str) -> Formula:
    """Parse a range formula such as ``^1.2.3 || >=2.0.0 <3.0.0``.

    Empty or whitespace-only text yields a formula matching any release.

    Raises:
        SemverSyntaxError: if ``text`` is not a valid formula.
    """
    return Parser(text).formula()
