"""Renderers from the statement AST to output text."""

from easydot.renderers.base import Renderer
from easydot.renderers.dot import DotRenderer, graph_to_dot

__all__ = ["DotRenderer", "Renderer", "graph_to_dot"]
