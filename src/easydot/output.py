"""Output dispatch — write dot text or hand it to the Graphviz renderer.

The output file's extension decides what happens: an image/document format
Graphviz understands is rendered by piping the text into `dot`; anything else
(including no extension) gets the dot text itself.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from easydot.config import DEFAULT_LAYOUT, LAYOUT_ENGINES, RENDER_FORMATS
from easydot.errors import OutputError

logger = logging.getLogger(__name__)

GRAPHVIZ_BINARY = "dot"


def render_format(output: str | Path) -> str | None:
    """Return the Graphviz output format for `output`, or None to write plain text."""
    ext = Path(output).suffix.lstrip(".")
    if ext in RENDER_FORMATS:
        return ext
    return None


def render_with_graphviz(dot: str, output: str | Path, fmt: str, layout: str = DEFAULT_LAYOUT) -> None:
    """Pipe `dot` into the Graphviz renderer, writing `output` in format `fmt`.

    Raises:
        OutputError: If the layout engine is not allowed, or `dot` is missing or fails.
    """
    if layout not in LAYOUT_ENGINES:
        raise OutputError(f"invalid layout engine '{layout}'; use one of {', '.join(sorted(LAYOUT_ENGINES))}")
    cmd = [GRAPHVIZ_BINARY, f"-K{layout}", f"-T{fmt}", f"-o{output}"]
    logger.debug("running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, input=dot, capture_output=True, text=True)
    except OSError as e:
        raise OutputError(f"cannot run '{GRAPHVIZ_BINARY}': {e}") from e
    if result.returncode != 0:
        detail = result.stderr.strip()
        raise OutputError(f"'{GRAPHVIZ_BINARY}' exited with status {result.returncode}" + (f": {detail}" if detail else ""))


def write_output(dot: str, output: str | Path, layout: str = DEFAULT_LAYOUT) -> None:
    """Write `dot` to `output`, rendering it first when the extension asks for it.

    Raises:
        OutputError: If rendering fails or the file cannot be written.
    """
    fmt = render_format(output)
    if fmt is not None:
        render_with_graphviz(dot, output, fmt, layout)
        return
    logger.debug("writing dot text to %s", output)
    try:
        with open(output, "w") as f:
            f.write(dot)
    except OSError as e:
        raise OutputError(f"cannot write '{output}': {e}") from e
