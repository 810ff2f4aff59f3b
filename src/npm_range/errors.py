"""Error types raised while parsing versions and range formulas."""

from __future__ import annotations

LEXICAL = "lexical"
STRUCTURAL = "structural"


class SemverSyntaxError(ValueError):
    """Raised when a version or range formula does not match the grammar.

    ``kind`` is ``"lexical"`` when a character matches no token and
    ``"structural"`` when the tokens do not form a valid version or formula.
    """

    def __init__(self, source: str, reason: str, *, kind: str = STRUCTURAL) -> None:
        self.source = source
        self.reason = reason
        self.kind = kind
        super().__init__(f"error parsing `{source}`: {reason}")

    @property
    def is_lexical(self) -> bool:
        return self.kind == LEXICAL
