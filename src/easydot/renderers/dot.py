"""Graphviz dot text renderer.

Turns the statement AST back into text for the Graphviz `dot` tool. The
output is always a single anonymous `graph`/`digraph` with a fixed preamble
(no node overlap, filled transparent nodes of the configured shape) followed
by the statements in source order, indented two spaces per nesting level.
Rendering is total: any AST the parser produces renders without error.
"""

from __future__ import annotations

from easydot.config import DEFAULT_SHAPE, GenerateConfig
from easydot.ir.ast import Attr, Decl, DeclId, Path, PathId, Statement, Subgraph
from easydot.types import EdgeOp

INDENT = "  "


def _attrs_suffix(attrs: tuple[Attr, ...] | None) -> str:
    if attrs is None:
        return ""
    return " [" + ", ".join(f"{a.key}={a.value}" for a in attrs) + "]"


def _decl_id_text(decl_id: DeclId) -> str:
    return decl_id.text


def _path_id_text(path_id: PathId) -> str:
    if isinstance(path_id, Subgraph):
        # inline endpoint: one line, declarations only, no indentation
        body = " ".join(_statement(s, EdgeOp.Undirected, 0) for s in path_id.statements)
        return "{ " + body + " }"
    return path_id.text


def _statement(stmt: Statement, op: EdgeOp, depth: int) -> str:
    indent = INDENT * depth
    if isinstance(stmt, Decl):
        return indent + _decl_id_text(stmt.id) + _attrs_suffix(stmt.attrs)
    if isinstance(stmt, Path):
        chain = op.value.join(_path_id_text(p) for p in stmt.ids)
        return indent + chain + _attrs_suffix(stmt.attrs)
    body = "\n".join(_statement(s, op, depth + 1) for s in stmt.statements)
    return f"{indent}{{\n{body}\n{indent}}}"


class DotRenderer:
    """Renders statements as a Graphviz graph."""

    def __init__(self, config: GenerateConfig | None = None) -> None:
        self.config = config or GenerateConfig()

    def preamble(self) -> list[str]:
        label = "" if self.config.autolabel else 'label="", '
        return [
            "overlap=false;",
            f'node [{label}shape={self.config.shape}, style=filled, fillcolor="#ffffff00"];',
        ]

    def render(self, statements: list[Statement]) -> str:
        op = EdgeOp.for_graph(self.config.directed)
        kind = "digraph" if self.config.directed else "graph"
        lines = [INDENT + line for line in self.preamble()]
        lines.append("\n".join(_statement(s, op, 1) for s in statements))
        return kind + " {\n" + "\n".join(lines) + "\n}"


def graph_to_dot(
    statements: list[Statement],
    directed: bool = False,
    autolabel: bool = False,
    shape: str = DEFAULT_SHAPE,
) -> str:
    """Render a parsed graph as Graphviz dot text.

    Args:
        statements: Top-level statements as returned by `parse`.
        directed: Emit a `digraph` with `->` edges instead of `graph` with `--`.
        autolabel: Let Graphviz label nodes with their ids; otherwise labels default to empty.
        shape: Default node shape.
    """
    config = GenerateConfig(directed=directed, autolabel=autolabel, shape=shape)
    return DotRenderer(config).render(statements)
