"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from easydot.ir.ast import Statement


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, statements: list[Statement]) -> str:
        """Render a parsed graph to an output string."""
        ...
