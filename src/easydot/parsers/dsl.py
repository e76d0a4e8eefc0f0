"""easydot parser — hand-rolled recursive descent with backtracking.

Every rule is a method on _Cursor that either returns a value and leaves the
cursor after it, or returns None and leaves the cursor where it started.
Alternatives are tried in order from the same position, so no rule needs
lookahead. Failures are recorded at the furthest position reached, which is
what a ParseError reports.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from easydot.config import MAX_NESTING
from easydot.errors import ParseError
from easydot.ir.ast import Attr, Decl, DeclId, Keyword, Node, Path, PathId, Statement, Subgraph
from easydot.types import EdgeOp, is_keyword

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ─── Tokens ──────────────────────────────────────────────────────────────────

_SPACES_RE = re.compile(r"[ \t]*")
_SPACE1_RE = re.compile(r"[ \t]+")
_MULTISPACE_RE = re.compile(r"[ \t\r\n]+")
_LINE_COMMENT_RE = re.compile(r"(?://|#)[^\r\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_TERMINATOR_RE = re.compile(r";|\r\n|\n|\r")
_EDGE_OP_RE = re.compile("|".join(re.escape(op.token) for op in EdgeOp))

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_STRING_RE = re.compile(r'"(?:[^"\\]|\\[\\"nt])*"')

_TRIVIA = (_MULTISPACE_RE, _LINE_COMMENT_RE, _BLOCK_COMMENT_RE)
_INLINE_TRIVIA = (_SPACE1_RE, _LINE_COMMENT_RE, _BLOCK_COMMENT_RE)


@dataclass
class _Cursor:
    """Stateful parser cursor over the input string."""

    src: str
    pos: int = 0
    furthest: int = 0
    expected: set[str] = field(default_factory=set)
    depth: int = 0

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def fail(self, what: str) -> None:
        """Remember that `what` was expected at the current position."""
        if self.pos > self.furthest:
            self.furthest = self.pos
            self.expected = {what}
        elif self.pos == self.furthest:
            self.expected.add(what)

    def consume(self, s: str) -> bool:
        if self.src.startswith(s, self.pos):
            self.pos += len(s)
            return True
        self.fail(f"'{s}'")
        return False

    def match_re(self, pattern: re.Pattern[str], what: str | None = None) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        if what is not None:
            self.fail(what)
        return None

    def separated(self, item: Callable[[], T | None], sep: Callable[[], bool]) -> list[T]:
        """One or more `item`s joined by `sep`; a dangling separator is given back."""
        first = item()
        if first is None:
            return []
        items = [first]
        while True:
            saved = self.pos
            if not sep():
                self.pos = saved
                break
            nxt = item()
            if nxt is None:
                self.pos = saved
                break
            items.append(nxt)
        return items

    # ── Trivia ────────────────────────────────────────────────────────────────

    def _skip(self, patterns: tuple[re.Pattern[str], ...]) -> None:
        while True:
            for pattern in patterns:
                m = pattern.match(self.src, self.pos)
                if m and m.end() > self.pos:
                    self.pos = m.end()
                    break
            else:
                return

    def skip_trivia(self) -> None:
        """Skip whitespace (newlines included) and comments."""
        self._skip(_TRIVIA)

    def skip_inline_trivia(self) -> None:
        """Skip spaces, tabs and comments, stopping at a line break."""
        self._skip(_INLINE_TRIVIA)

    def space1(self) -> bool:
        return self.match_re(_SPACE1_RE) is not None

    def sep(self, s: str) -> bool:
        """`s` with optional spaces or tabs on both sides."""
        start = self.pos
        self.match_re(_SPACES_RE)
        if not self.consume(s):
            self.pos = start
            return False
        self.match_re(_SPACES_RE)
        return True

    def terminator(self) -> bool:
        self.skip_inline_trivia()
        if self.match_re(_TERMINATOR_RE, "';' or line break") is None:
            return False
        self.skip_trivia()
        return True

    # ── Literals ──────────────────────────────────────────────────────────────

    def ident(self) -> str | None:
        return self.match_re(_IDENT_RE, "identifier")

    def safe_ident(self) -> str | None:
        start = self.pos
        text = self.ident()
        if text is not None and is_keyword(text):
            self.pos = start
            self.fail("non-keyword identifier")
            return None
        return text

    def number(self) -> str | None:
        return self.match_re(_NUMBER_RE, "number")

    def esc_string(self) -> str | None:
        return self.match_re(_STRING_RE, "string")

    def node_text(self) -> str | None:
        text = self.safe_ident()
        if text is None:
            text = self.number()
        return text

    # ── Attributes ────────────────────────────────────────────────────────────

    def parse_attr(self) -> Attr | None:
        label = self.esc_string()
        if label is not None:
            return Attr.label(label)
        start = self.pos
        key = self.safe_ident()
        if key is None:
            return None
        if not self.sep("="):
            self.pos = start
            return None
        for alternative in (self.ident, self.number, self.esc_string):
            value = alternative()
            if value is not None:
                return Attr(key=key, value=value)
        self.pos = start
        return None

    def attr_sep(self) -> bool:
        return self.sep(",") or self.space1()

    def parse_attrs(self) -> list[Attr]:
        return self.separated(self.parse_attr, self.attr_sep)

    def parse_opt_attrs(self) -> tuple[Attr, ...] | None:
        """`: attr, attr ...` if present; a colon with no valid list is left alone."""
        start = self.pos
        if not self.sep(":"):
            return None
        attrs = self.parse_attrs()
        if not attrs:
            self.pos = start
            return None
        return tuple(attrs)

    # ── Identifiers ───────────────────────────────────────────────────────────

    def parse_decl_id(self) -> DeclId | None:
        text = self.node_text()
        if text is not None:
            return Node(text)
        # only a reserved word can get here as an identifier
        text = self.ident()
        if text is not None:
            return Keyword.new(text)
        return None

    def parse_path_id(self) -> PathId | None:
        text = self.node_text()
        if text is not None:
            return Node(text)
        return self.parse_inline_subgraph()

    def path_sep(self) -> bool:
        """Spaces, or an edge operator with optional spaces around it."""
        start = self.pos
        self.match_re(_SPACES_RE)
        if self.match_re(_EDGE_OP_RE, "'--' or '->'") is not None:
            self.match_re(_SPACES_RE)
            return True
        self.pos = start
        return self.space1()

    def decl_sep(self) -> bool:
        return self.sep(";") or self.space1()

    def parse_inline_subgraph(self) -> Subgraph | None:
        """`{ a b:color=red }` used as one endpoint of a path; declarations only."""
        start = self.pos
        if not self.consume("{"):
            return None
        self.match_re(_SPACES_RE)
        decls = self.separated(self.parse_decl, self.decl_sep)
        if not decls:
            self.pos = start
            return None
        self.match_re(_SPACES_RE)
        if not self.consume("}"):
            self.pos = start
            return None
        return Subgraph(tuple(decls))

    # ── Statements ────────────────────────────────────────────────────────────

    def parse_path(self) -> Path | None:
        start = self.pos
        ids = self.separated(self.parse_path_id, self.path_sep)
        if len(ids) < 2:
            self.pos = start
            return None
        return Path(tuple(ids), self.parse_opt_attrs())

    def parse_decl(self) -> Decl | None:
        decl_id = self.parse_decl_id()
        if decl_id is None:
            return None
        return Decl(decl_id, self.parse_opt_attrs())

    def parse_subgraph(self) -> Subgraph | None:
        start = self.pos
        if not self.consume("{"):
            return None
        if self.depth >= MAX_NESTING:
            raise ParseError(self.src, start, (f"at most {MAX_NESTING} nested subgraphs",))
        self.depth += 1
        try:
            body = self.parse_graph()
        finally:
            self.depth -= 1
        if body is None or not self.consume("}"):
            self.pos = start
            return None
        return Subgraph(tuple(body))

    def parse_statement(self) -> Statement | None:
        # Path first: a lone id is also a valid Decl, but only Path takes several.
        for alternative in (self.parse_path, self.parse_decl, self.parse_subgraph):
            stmt = alternative()
            if stmt is not None:
                return stmt
        return None

    # ── Graph ─────────────────────────────────────────────────────────────────

    def parse_graph(self) -> list[Statement] | None:
        start = self.pos
        self.skip_trivia()
        statements = self.separated(self.parse_statement, self.terminator)
        if not statements:
            self.pos = start
            return None
        self.skip_trivia()
        return statements

    def parse_all(self) -> list[Statement]:
        statements = self.parse_graph()
        if statements is not None and self.eof():
            return statements
        if statements is not None:
            self.fail("end of input")
        raise ParseError(self.src, self.furthest, tuple(sorted(self.expected)))


class DslParser:
    """Parser for the easydot graph language."""

    def parse(self, src: str) -> list[Statement]:
        cursor = _Cursor(src=src)
        statements = cursor.parse_all()
        logger.debug("parsed %d top-level statements", len(statements))
        return statements
