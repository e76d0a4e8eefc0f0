"""Source parsers for easydot."""

from __future__ import annotations

from easydot.ir.ast import Statement
from easydot.parsers.base import Parser
from easydot.parsers.dsl import DslParser

_PARSER: Parser = DslParser()


def parse(src: str) -> list[Statement]:
    """Parse easydot source into its statement AST.

    Raises:
        ParseError: If the whole input is not a valid graph.
    """
    return _PARSER.parse(src)


__all__ = ["DslParser", "Parser", "parse"]
