from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .errors import SpanError


@runtime_checkable
class SpanLike(Protocol):
    """Anything that can be rendered.

    Lines are 1-based, columns are 0-based character offsets within their line.
    """

    @property
    def start_line(self) -> int: ...

    @property
    def start_column(self) -> int: ...

    @property
    def end_line(self) -> int: ...

    @property
    def end_column(self) -> int: ...


@dataclass(frozen=True, slots=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single source text."""

    start: Position
    end: Position

    @classmethod
    def of(cls, start_line: int, start_column: int, end_line: int, end_column: int) -> "Span":
        return cls(start=Position(start_line, start_column), end=Position(end_line, end_column))

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def start_column(self) -> int:
        return self.start.column

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def end_column(self) -> int:
        return self.end.column

    def is_empty(self) -> bool:
        return is_empty(self)

    def is_single_line(self) -> bool:
        return is_single_line(self)

    def to_range(self) -> str:
        return to_range(self)

    def debug(self, source: str) -> str:
        """Render this span against `source`, see `debugspan.debug_span`."""
        from .render import debug_span

        return debug_span(self, source)

    def __str__(self) -> str:
        return self.to_range()


def is_empty(span: SpanLike) -> bool:
    return span.start_line == span.end_line and span.start_column == span.end_column


def is_single_line(span: SpanLike) -> bool:
    return span.start_line == span.end_line


def to_range(span: SpanLike) -> str:
    """Format as `start_line:start_column..end_line:end_column`, e.g. `1:7..1:10`."""
    return f"{span.start_line}:{span.start_column}..{span.end_line}:{span.end_column}"


_RANGE_RE = re.compile(r"\s*(\d+):(\d+)\.\.(\d+):(\d+)\s*")


def parse_range(text: str) -> Span:
    m = _RANGE_RE.fullmatch(text)
    if m is None:
        raise SpanError(
            message=f"malformed range {text!r}",
            hint="expected START_LINE:START_COLUMN..END_LINE:END_COLUMN, e.g. 1:7..1:10",
        )
    sl, sc, el, ec = (int(g) for g in m.groups())
    return Span.of(sl, sc, el, ec)
