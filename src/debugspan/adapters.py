from __future__ import annotations

import ast
import tokenize

from .errors import SpanError
from .render import split_lines
from .spans import Span


def span_from_ast(node: ast.AST, source: str | None = None) -> Span:
    """Span of an `ast` node.

    CPython reports `col_offset`/`end_col_offset` as UTF-8 byte offsets. When
    `source` is given they are converted to character columns; without it they
    are used as-is, which is only correct for ASCII lines.

    `ast` also ends a line at a bare carriage return, while the conversion only
    splits on newlines. Normalize old Mac line endings before passing `source`.
    """
    lineno = getattr(node, "lineno", None)
    col = getattr(node, "col_offset", None)
    if lineno is None or col is None:
        raise SpanError(
            message=f"{type(node).__name__} node has no location",
            hint="nodes built by hand need ast.fix_missing_locations()",
        )
    end_lineno = getattr(node, "end_lineno", None)
    end_col = getattr(node, "end_col_offset", None)
    if end_lineno is None or end_col is None:
        end_lineno, end_col = lineno, col

    if source is not None:
        lines = split_lines(source)
        col = _char_column(lines, lineno, col)
        end_col = _char_column(lines, end_lineno, end_col)
    return Span.of(lineno, col, end_lineno, end_col)


def span_from_token(tok: tokenize.TokenInfo) -> Span:
    (sl, sc), (el, ec) = tok.start, tok.end
    return Span.of(sl, sc, el, ec)


def span_from_syntax_error(err: SyntaxError) -> Span:
    """Span of a `SyntaxError`, with its 1-based offsets made 0-based.

    A missing end collapses the span onto its start, which renders as nothing.
    """
    if err.lineno is None:
        raise SpanError(message=f"syntax error has no location: {err.msg}")
    offset = err.offset or 1
    end_lineno = getattr(err, "end_lineno", None) or err.lineno
    end_offset = getattr(err, "end_offset", None) or 0
    if end_offset < 1:
        end_lineno, end_offset = err.lineno, offset
    return Span.of(err.lineno, offset - 1, end_lineno, end_offset - 1)


def _char_column(lines: list[str], lineno: int, byte_col: int) -> int:
    if not 1 <= lineno <= len(lines):
        raise SpanError(
            message=f"line {lineno} is past the end of the source ({len(lines)} lines)",
            hint="pass the source the node was parsed from",
        )
    raw = lines[lineno - 1].encode("utf-8")
    return len(raw[:byte_col].decode("utf-8"))
