"""Error types raised by easydot.

Parsing is all-or-nothing: a single ParseError describes the furthest point the
parser reached. Generation never fails. OutputError covers everything that can
go wrong after generation (renderer lookup, subprocess, file writes).
"""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class ParseError(ValueError):
    """The source is not a valid easydot graph."""

    def __init__(self, src: str, pos: int, expected: tuple[str, ...] = ()) -> None:
        self.pos = pos
        self.line, self.column = _line_col(src, pos)
        self.expected = expected
        self.snippet = _line_at(src, pos)
        super().__init__(self._message())

    def _message(self) -> str:
        if self.expected:
            what = "expected " + ", ".join(self.expected)
        else:
            what = "unexpected input"
        msg = f"line {self.line}, column {self.column}: {what}"
        if self.snippet:
            msg += f"\n  {self.snippet}\n  {' ' * (self.column - 1)}^"
        return msg


class OutputError(Exception):
    """Writing the generated graph or running the renderer failed."""


def _line_start(src: str, pos: int) -> tuple[int, int]:
    """Line number of `pos` and the offset where that line begins."""
    line, start = 1, 0
    for m in _LINE_BREAK_RE.finditer(src, 0, pos):
        line += 1
        start = m.end()
    return line, start


def _line_col(src: str, pos: int) -> tuple[int, int]:
    line, start = _line_start(src, pos)
    return line, pos - start + 1


def _line_at(src: str, pos: int) -> str:
    _, start = _line_start(src, pos)
    m = _LINE_BREAK_RE.search(src, pos)
    end = m.start() if m else len(src)
    return src[start:end]
