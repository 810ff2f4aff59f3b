from __future__ import annotations

import pytest

from npm_range import (
    Comparator,
    ExprClause,
    Formula,
    Op,
    SimpleRange,
    Version,
    normalize,
    parse_formula,
    print_normalized,
    to_formula,
)


def _dnf(text: str) -> str:
    return print_normalized(normalize(parse_formula(text)))


@pytest.mark.parametrize(
    "text, expected",
    [
        # comparators on exact versions pass through
        (">=1.2.3", ">=1.2.3"),
        ("<1.2.3-rc.1", "<1.2.3-rc.1"),
        ("=1.2.3", "1.2.3"),
        ("1.2.3", "1.2.3"),
        # comparators on patterns
        ("=1", "1.0.0"),
        (">=1.2", ">=1.2.0"),
        ("<=1", "<=1.0.0"),
        ("<1.2", "<1.2.0"),
        ("<*", "<0.0.0"),
        (">*", "<0.0.0"),
        (">1", ">=2.0.0"),
        (">1.2", ">=1.3.0"),
        # x-ranges
        ("*", ">=0.0.0"),
        ("1.x", ">=1.0.0 <2.0.0"),
        ("1.2.x", ">=1.2.0 <1.3.0"),
        # tilde
        ("~1.2.3", ">=1.2.3 <1.3.0"),
        ("~1.2", ">=1.2.0 <1.3.0"),
        ("~1", ">=1.0.0 <2.0.0"),
        ("~0.0.1", ">=0.0.1 <0.1.0"),
        ("~1.2.3-beta.2", ">=1.2.3-beta.2 <1.3.0"),
        ("~*", ">=0.0.0 <0.0.0"),
        # caret
        ("^1.2.3", ">=1.2.3 <2.0.0"),
        ("^0.2.3", ">=0.2.3 <0.3.0"),
        ("^0.0.3", ">=0.0.3 <0.0.4"),
        ("^1.2.3-beta.2", ">=1.2.3-beta.2 <2.0.0"),
        ("^0.0.3-beta", ">=0.0.3-beta <0.0.4"),
        ("^*", ">=0.0.0"),
        ("^1", ">=1.0.0 <2.0.0"),
        ("^0", ">=0.0.0 <1.0.0"),
        ("^0.0", ">=0.0.0 <0.1.0"),
        ("^0.1", ">=0.1.0 <0.2.0"),
        ("^1.2", ">=1.2.0 <2.0.0"),
        # hyphen
        ("1.2.3 - 2.3.4", ">=1.2.3 <=2.3.4"),
        ("1.2 - 2.3.4", ">=1.2.0 <=2.3.4"),
        ("1.2.3 - 2.3", ">=1.2.3 <2.4.0"),
        ("1.2.3 - 2", ">=1.2.3 <3.0.0"),
        ("* - 2.0.0", "<=2.0.0"),
        ("1.2.3 - *", ">=1.2.3"),
        ("* - *", ">=0.0.0"),
        # combinations
        (">=1.0.0 <2.0.0 || ^3.1", ">=1.0.0 <2.0.0 || >=3.1.0 <4.0.0"),
        ("1.x ~2.1", ">=1.0.0 <2.0.0 >=2.1.0 <2.2.0"),
        ("", ">=0.0.0"),
    ],
)
def test_normalized_form(text: str, expected: str) -> None:
    assert _dnf(text) == expected


def test_build_metadata_stripped_everywhere() -> None:
    normalized = normalize(
        parse_formula("1.2.3+a || >=1.0.0+b || ~1.0.0+c || ^1.0.0+d || 1.0.0+e - 2.0.0+f")
    )
    versions = [comparator.version for conjunction in normalized for comparator in conjunction]
    assert versions
    assert all(v.build == () for v in versions)


def test_normalized_structure() -> None:
    assert normalize(parse_formula("^1.2.3 || 4.5.6")) == (
        (Comparator(Op.GTE, Version(1, 2, 3)), Comparator(Op.LT, Version(2, 0, 0))),
        (Comparator(Op.EQ, Version(4, 5, 6)),),
    )


def test_to_formula_builds_expression_clauses() -> None:
    normalized = normalize(parse_formula("1.x"))
    assert to_formula(normalized) == Formula(
        (
            SimpleRange(
                (ExprClause(Op.GTE, Version(1, 0, 0)), ExprClause(Op.LT, Version(2, 0, 0)))
            ),
        )
    )


@pytest.mark.parametrize(
    "text",
    ["^0.2.3 || ~1.x", "1.2.3 - 2 || >1.2 <=3.0.0-rc.1", "*", "=1.x", "<* || >*", "1.2.3-alpha"],
)
def test_printed_normal_form_reparses_to_same_normal_form(text: str) -> None:
    normalized = normalize(parse_formula(text))
    assert normalize(parse_formula(print_normalized(normalized))) == normalized
