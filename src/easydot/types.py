"""Shared type definitions for easydot.

Small enums and constant sets used across the parser, the AST and the renderers.
"""

from __future__ import annotations

from enum import Enum

# Reserved words, compared case-insensitively. They can only be declared
# (to set graph/node/edge defaults), never used as a plain node id.
KEYWORDS: frozenset[str] = frozenset({"node", "edge", "graph", "subgraph"})


def is_keyword(text: str) -> bool:
    return text.lower() in KEYWORDS


class EdgeOp(Enum):
    Directed = " -> "
    Undirected = " -- "

    @classmethod
    def for_graph(cls, directed: bool) -> EdgeOp:
        return cls.Directed if directed else cls.Undirected

    @property
    def token(self) -> str:
        return self.value.strip()
