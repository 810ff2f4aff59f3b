"""Parse standalone ``[v]MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` versions."""

from __future__ import annotations

from ..models.version import Version
from .formula import Parser


def parse_version(text: str) -> Version:
    """Parse a complete semantic version.

    Raises:
        SemverSyntaxError: if ``text`` is not a complete version. Partial
            versions such as ``1.2`` or ``1.x`` are rejected.
    """
    parser = Parser(text, label="invalid version")
    start = parser.peek()
    target = parser.target()
    if not isinstance(target, Version):
        end = parser.peek().pos
        fragment = text[start.pos:end]
        raise parser.fail(parser.peek(), f"{fragment!r} is not a complete version")
    parser.expect_end()
    return target
