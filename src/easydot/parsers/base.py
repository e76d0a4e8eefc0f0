"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from easydot.ir.ast import Statement


class Parser(Protocol):
    """Protocol that all source parsers must implement."""

    def parse(self, src: str) -> list[Statement]:
        """Parse source text into a list of top-level statements."""
        ...
