"""AST data structures for the easydot graph language.

These types represent the parsed form of the input DSL. A source file parses to
a list of statements; each statement is a declaration, a path (edge chain) or a
nested subgraph. All nodes are immutable and hold the lexical text exactly as
written, with keywords folded to lower case.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Attr:
    key: str
    value: str

    @classmethod
    def label(cls, value: str) -> Attr:
        """Bare quoted string shorthand: `"text"` means `label="text"`."""
        return cls(key="label", value=value)


@dataclass(frozen=True)
class Node:
    """A plain identifier or number."""

    text: str


@dataclass(frozen=True)
class Keyword:
    """One of node/edge/graph/subgraph, always lower case."""

    text: str

    @classmethod
    def new(cls, text: str) -> Keyword:
        return cls(text=text.lower())


@dataclass(frozen=True)
class Decl:
    id: DeclId
    attrs: tuple[Attr, ...] | None = None


@dataclass(frozen=True)
class Path:
    ids: tuple[PathId, ...]
    attrs: tuple[Attr, ...] | None = None

    def __post_init__(self) -> None:
        if len(self.ids) < 2:
            raise ValueError(f"a path needs at least 2 ids, got {len(self.ids)}")


@dataclass(frozen=True)
class Subgraph:
    """A `{ ... }` block.

    Used both as a statement and, holding declarations only, as an inline
    endpoint of a path.
    """

    statements: tuple[Statement, ...]


DeclId = Node | Keyword
PathId = Node | Subgraph
Statement = Decl | Path | Subgraph
