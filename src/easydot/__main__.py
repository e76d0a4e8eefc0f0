"""CLI entry point for easydot."""

import logging
import sys

import click

from easydot.config import DEFAULT_LAYOUT, DEFAULT_SHAPE, GenerateConfig
from easydot.errors import OutputError, ParseError
from easydot.output import write_output
from easydot.parsers import parse
from easydot.renderers.base import Renderer
from easydot.renderers.dot import DotRenderer


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--directed", "-d", "directed", is_flag=True, help="Directed graph")
@click.option("--autolabel", "-a", "autolabel", is_flag=True, help="Use node id as default label")
@click.option("--shape", "-s", "shape", type=str, default=DEFAULT_SHAPE, show_default=True, help="Default node shape")
@click.option("--output", "-o", "output", type=str, default=None, help="Output file (dot, png, jpeg, svg, pdf...)")
@click.option("--layout", "-l", "layout", type=str, default=DEFAULT_LAYOUT, show_default=True, help="Set layout engine")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug information to stderr")
def main(
    input: str | None,
    directed: bool,
    autolabel: bool,
    shape: str,
    output: str | None,
    layout: str,
    verbose: bool,
) -> None:
    """Simple graph language compiled to Graphviz dot, optionally rendered."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        statements = parse(text)
    except ParseError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    config = GenerateConfig(directed=directed, autolabel=autolabel, shape=shape)
    renderer: Renderer = DotRenderer(config)
    dot = renderer.render(statements)

    if output is None:
        click.echo(dot)
        return
    try:
        write_output(dot, output, layout)
    except OutputError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
