"""Intermediate representation: the statement AST."""

from easydot.ir.ast import Attr, Decl, DeclId, Keyword, Node, Path, PathId, Statement, Subgraph

__all__ = [
    "Attr",
    "Decl",
    "DeclId",
    "Keyword",
    "Node",
    "Path",
    "PathId",
    "Statement",
    "Subgraph",
]
