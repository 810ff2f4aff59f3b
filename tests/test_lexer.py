from __future__ import annotations

import pytest

from npm_range import SemverSyntaxError
from npm_range.parsers.lexer import tokenize


def _kinds(src: str) -> list[tuple[str, str]]:
    return [(t.kind, t.text) for t in tokenize(src)]


def test_tokens_version_with_prerelease_and_build() -> None:
    assert _kinds("v1.2.3-beta.1+exp") == [
        ("V", "v"),
        ("NUM", "1"),
        ("DOT", "."),
        ("NUM", "2"),
        ("DOT", "."),
        ("NUM", "3"),
        ("PRE", "-beta.1"),
        ("BUILD", "+exp"),
        ("EOF", ""),
    ]


def test_whitespace_between_clauses_is_and() -> None:
    kinds = [k for k, _ in _kinds(">=1.0.0 <2.0.0")]
    assert kinds == ["OP", "NUM", "DOT", "NUM", "DOT", "NUM", "AND", "OP", "NUM", "DOT", "NUM", "DOT", "NUM", "EOF"]


def test_whitespace_around_or_is_absorbed() -> None:
    toks = _kinds("1   ||   2")
    assert toks == [("NUM", "1"), ("OR", "   ||   "), ("NUM", "2"), ("EOF", "")]


def test_spaced_dash_is_hyphen_token() -> None:
    toks = _kinds("1.2.3 - 2")
    assert ("DASH", " - ") in toks
    assert all(kind != "PRE" for kind, _ in toks)


def test_unspaced_dash_is_prerelease() -> None:
    toks = _kinds("1.2.3-2")
    assert toks[-2] == ("PRE", "-2")


def test_space_after_operator_dropped() -> None:
    assert [k for k, _ in _kinds(">=  1")] == ["OP", "NUM", "EOF"]
    assert [k for k, _ in _kinds("^ 1")] == ["SPEC", "NUM", "EOF"]


def test_leading_and_trailing_whitespace_dropped() -> None:
    assert _kinds("  1  ") == [("NUM", "1"), ("EOF", "")]
    assert _kinds("   ") == [("EOF", "")]


def test_wildcards() -> None:
    assert [k for k, _ in _kinds("1.x.X")] == ["NUM", "DOT", "WILDCARD", "DOT", "WILDCARD", "EOF"]
    assert _kinds("*") == [("WILDCARD", "*"), ("EOF", "")]


def test_token_positions() -> None:
    toks = tokenize(">=1 || <3")
    or_token = next(t for t in toks if t.kind == "OR")
    lt = toks[toks.index(or_token) + 1]
    assert (or_token.pos, lt.pos, lt.text) == (3, 7, "<")


@pytest.mark.parametrize("src", ["1.2.3 @", "1 | 2", "1.2.3-", "abc", "1.2.3 -alpha", "1.x-beta"])
def test_unexpected_character(src: str) -> None:
    with pytest.raises(SemverSyntaxError) as exc:
        tokenize(src)
    assert exc.value.kind == "lexical"
    assert exc.value.is_lexical
    assert "unexpected character" in str(exc.value)
    assert src in str(exc.value)
