"""easydot: a small graph language compiled to Graphviz dot text."""

from easydot.config import DEFAULT_SHAPE
from easydot.errors import OutputError, ParseError
from easydot.parsers import parse
from easydot.renderers.dot import DotRenderer, graph_to_dot


def to_dot(src: str, directed: bool = False, autolabel: bool = False, shape: str = DEFAULT_SHAPE) -> str:
    """Parse an easydot source string and render it as Graphviz dot text.

    Args:
        src: easydot source string.
        directed: Produce a digraph with `->` edges; otherwise a graph with `--` edges.
        autolabel: Keep Graphviz's default of labelling nodes with their ids.
        shape: Default node shape.

    Returns:
        The dot text, without a trailing newline.

    Raises:
        ParseError: If the input cannot be parsed.
    """
    return graph_to_dot(parse(src), directed=directed, autolabel=autolabel, shape=shape)


__all__ = ["DotRenderer", "OutputError", "ParseError", "graph_to_dot", "parse", "to_dot"]
