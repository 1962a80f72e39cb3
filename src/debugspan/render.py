from __future__ import annotations

import logging

from .errors import SpanError
from .spans import SpanLike, is_empty, is_single_line, to_range


_log = logging.getLogger(__name__)

# Horizontal room between the longest line and the right-hand bar.
PADDING = 3


def debug_span(span: SpanLike, source: str) -> str:
    """Render `span` as an annotated excerpt of `source`.

    Single-line spans get a caret marker under the covered columns::

         --> 1:7..1:10
          |
        1 | struct Foo;
          |        ^^^
          |

    Multi-line spans get a bracket around the covered lines::

         --> 1:11..4:1
          |
          |            ┌────╮
        1 | struct Foo {    │
        2 |     a: i32,     │
        3 |     b: i32,     │
        4 | }               │
          | └───────────────╯
          |

    Empty spans render as the empty string. Spans that do not fit `source`
    raise `SpanError`.
    """
    if is_empty(span):
        _log.debug("span %d:%d..%d:%d is empty, nothing to render", *_coords(span))
        return ""
    _check_span(span)
    if is_single_line(span):
        _log.debug("rendering single-line span %d:%d..%d:%d", *_coords(span))
        return _single_line(span, source)
    _log.debug("rendering multi-line span %d:%d..%d:%d", *_coords(span))
    return _multi_line(span, source)


def _single_line(span: SpanLike, source: str) -> str:
    width = _gutter_width(span)
    line = _spanned_lines(span, source)[0]
    out = [
        _range_line(span, width),
        _empty_line(width),
        _code_line(span.start_line, line, width),
        _marker_line(span, width),
        _empty_line(width),
    ]
    return "\n".join(out) + "\n"


def _multi_line(span: SpanLike, source: str) -> str:
    width = _gutter_width(span)
    lines = _spanned_lines(span, source)
    max_len = max(len(line) for line in lines)
    out = [
        _range_line(span, width),
        _empty_line(width),
        _start_line(span, max_len, width),
    ]
    for i, line in enumerate(lines):
        out.append(_boxed_code_line(span.start_line + i, line, max_len, width))
    out.append(_end_line(span, max_len, width))
    out.append(_empty_line(width))
    return "\n".join(out) + "\n"


def _coords(span: SpanLike) -> tuple[int, int, int, int]:
    return span.start_line, span.start_column, span.end_line, span.end_column


def _gutter_width(span: SpanLike) -> int:
    return len(str(span.end_line))


def _range_line(span: SpanLike, width: int) -> str:
    return f"{'':{width}}--> {to_range(span)}"


def _empty_line(width: int) -> str:
    return f"{'':{width}} |"


def _code_line(line_no: int, line: str, width: int) -> str:
    return f"{line_no:>{width}} | {line}"


def _marker_line(span: SpanLike, width: int) -> str:
    carets = _repeat(span, "^", span.end_column - span.start_column)
    return f"{'':{width}} | {' ' * span.start_column}{carets}"


def _start_line(span: SpanLike, max_len: int, width: int) -> str:
    dashes = _repeat(span, "─", max_len + PADDING - span.start_column)
    return f"{'':{width}} | {' ' * span.start_column}┌{dashes}╮"


def _boxed_code_line(line_no: int, line: str, max_len: int, width: int) -> str:
    fill = " " * (max_len + PADDING + 1 - len(line))
    return f"{_code_line(line_no, line, width)}{fill}│"


def _end_line(span: SpanLike, max_len: int, width: int) -> str:
    spaces = _repeat(span, " ", span.end_column - 1)
    dashes = _repeat(span, "─", max_len + PADDING - span.end_column + 1)
    return f"{'':{width}} | {spaces}└{dashes}╯"


def _repeat(span: SpanLike, ch: str, n: int) -> str:
    if n < 0:
        raise SpanError(
            message=f"span columns do not fit the source ({ch!r} repeated {n} times)",
            span=span,
            hint="columns must lie within the spanned lines",
        )
    return ch * n


def _check_span(span: SpanLike) -> None:
    if span.start_line < 1:
        raise SpanError(message="line numbers are 1-based", span=span)
    if span.start_column < 0 or span.end_column < 0:
        raise SpanError(message="columns must not be negative", span=span)
    if span.start_line > span.end_line:
        raise SpanError(message="span starts after it ends", span=span)
    if span.start_line == span.end_line and span.start_column > span.end_column:
        raise SpanError(message="span starts after it ends", span=span)


def split_lines(source: str) -> list[str]:
    # Split on "\n", drop a trailing "\r", and let a final newline end the last
    # line instead of opening an empty one.
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _spanned_lines(span: SpanLike, source: str) -> list[str]:
    lines = split_lines(source)
    if span.end_line > len(lines):
        raise SpanError(
            message=f"line {span.end_line} is past the end of the source ({len(lines)} lines)",
            span=span,
            hint="render the span against the text it was computed from",
        )
    return lines[span.start_line - 1 : span.end_line]
