"""Tests for easydot.renderers.dot — exact dot text output."""

from easydot import to_dot
from easydot.config import GenerateConfig
from easydot.ir.ast import Attr, Decl, Keyword, Node, Path, Subgraph
from easydot.renderers.dot import DotRenderer, graph_to_dot

PREAMBLE_LABELLED = '  overlap=false;\n  node [label="", shape=circle, style=filled, fillcolor="#ffffff00"];\n'


def _body(dot: str) -> list[str]:
    """Statement lines between the preamble and the closing brace."""
    return dot.split("\n")[3:-1]


# ─── Preamble ────────────────────────────────────────────────────────────────


def test_undirected_header():
    dot = graph_to_dot([Decl(Node("a"))])
    assert dot == "graph {\n" + PREAMBLE_LABELLED + "  a\n}"


def test_directed_header():
    dot = graph_to_dot([Decl(Node("a"))], directed=True)
    assert dot.startswith("digraph {\n  overlap=false;\n")


def test_autolabel_drops_empty_label():
    dot = graph_to_dot([Decl(Node("a"))], autolabel=True, shape="box")
    assert dot.split("\n")[2] == '  node [shape=box, style=filled, fillcolor="#ffffff00"];'


def test_no_autolabel_injects_empty_label_regardless_of_flags():
    for directed in (False, True):
        dot = graph_to_dot([Decl(Node("a"))], directed=directed, autolabel=False, shape="point")
        assert dot.split("\n")[2] == '  node [label="", shape=point, style=filled, fillcolor="#ffffff00"];'


def test_renderer_uses_config():
    renderer = DotRenderer(GenerateConfig(directed=True, autolabel=True, shape="box"))
    assert renderer.render([Path((Node("a"), Node("b")))]).split("\n") == [
        "digraph {",
        "  overlap=false;",
        '  node [shape=box, style=filled, fillcolor="#ffffff00"];',
        "  a -> b",
        "}",
    ]


def test_renderer_default_config():
    assert DotRenderer().render([Decl(Node("a"))]) == graph_to_dot([Decl(Node("a"))])


# ─── Statements ──────────────────────────────────────────────────────────────


def test_decl_with_attrs():
    stmt = Decl(Node("x"), (Attr("label", '"hi"'), Attr("color", "red")))
    assert _body(graph_to_dot([stmt])) == ['  x [label="hi", color=red]']


def test_keyword_decl_renders_like_any_decl():
    stmt = Decl(Keyword("edge"), (Attr("color", "gray"),))
    assert _body(graph_to_dot([stmt])) == ["  edge [color=gray]"]


def test_path_operator_follows_direction():
    path = Path((Node("a"), Node("b"), Node("c")))
    assert _body(graph_to_dot([path], directed=True)) == ["  a -> b -> c"]
    assert _body(graph_to_dot([path], directed=False)) == ["  a -- b -- c"]


def test_path_with_attrs():
    path = Path((Node("a"), Node("b")), (Attr("weight", "2"), Attr("style", "dashed")))
    assert _body(graph_to_dot([path])) == ["  a -- b [weight=2, style=dashed]"]


def test_nested_subgraph_indentation():
    stmt = Subgraph((Decl(Node("a")), Subgraph((Decl(Node("b")),))))
    assert _body(graph_to_dot([stmt, Decl(Node("c"))])) == [
        "  {",
        "    a",
        "    {",
        "      b",
        "    }",
        "  }",
        "  c",
    ]


def test_inline_subgraph_is_compact():
    inline = Subgraph((Decl(Node("a"), (Attr("color", "red"),)), Decl(Node("b"))))
    path = Path((inline, Node("c")))
    assert _body(graph_to_dot([path], directed=True)) == ["  { a [color=red] b } -> c"]


def test_inline_subgraph_inside_nested_subgraph():
    path = Path((Node("x"), Subgraph((Decl(Node("y")),))))
    assert _body(graph_to_dot([Subgraph((path,))])) == ["  {", "    x -- { y }", "  }"]


# ─── End to end ──────────────────────────────────────────────────────────────


def test_edge_and_decl_example():
    dot = to_dot("a -- b : color=blue\nc", directed=False, autolabel=True, shape="box")
    assert dot == (
        "graph {\n"
        "  overlap=false;\n"
        '  node [shape=box, style=filled, fillcolor="#ffffff00"];\n'
        "  a -- b [color=blue]\n"
        "  c\n"
        "}"
    )


def test_label_shorthand_round_trip():
    assert _body(to_dot('x : "hi", color=red')) == ['  x [label="hi", color=red]']


def test_keywords_lowercased_in_output():
    assert _body(to_dot("GRAPH : rankdir=LR\nNode")) == ["  graph [rankdir=LR]", "  node"]


def test_space_separated_path_renders_with_operator():
    assert _body(to_dot("a b c", directed=True)) == ["  a -> b -> c"]


def test_generation_is_deterministic():
    src = "graph : splines=true\n{ a; b } c : color=red\n{\n  d e\n}\n"
    assert to_dot(src, directed=True) == to_dot(src, directed=True)
