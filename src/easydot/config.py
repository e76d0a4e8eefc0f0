"""Centralized configuration for easydot."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SHAPE = "circle"
DEFAULT_LAYOUT = "neato"

# Output extensions handed to the Graphviz renderer; anything else is written as text.
RENDER_FORMATS: frozenset[str] = frozenset({"eps", "gif", "jpg", "jpeg", "json", "pdf", "png", "ps", "svg", "webp"})

LAYOUT_ENGINES: frozenset[str] = frozenset({"dot", "neato", "fdp", "sfdp", "circo", "twopi", "osage", "patchwork"})

# Deepest `{ ... }` nesting the parser accepts.
MAX_NESTING = 100


@dataclass
class GenerateConfig:
    """Configuration for the code generator."""

    directed: bool = False
    autolabel: bool = False
    shape: str = DEFAULT_SHAPE
