from __future__ import annotations

from .adapters import span_from_ast, span_from_syntax_error, span_from_token
from .errors import SpanError
from .render import PADDING, debug_span
from .spans import Position, Span, SpanLike, is_empty, is_single_line, parse_range, to_range

__all__ = [
    "PADDING",
    "Position",
    "Span",
    "SpanError",
    "SpanLike",
    "debug_span",
    "is_empty",
    "is_single_line",
    "parse_range",
    "span_from_ast",
    "span_from_syntax_error",
    "span_from_token",
    "to_range",
]
