from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .spans import SpanLike


@dataclass(slots=True)
class SpanError(Exception):
    """A span/source pair that cannot be rendered, or a span that cannot be built."""

    message: str
    span: SpanLike | None = None
    hint: str | None = None

    def __str__(self) -> str:
        base = self.message
        if self.span is not None:
            s = self.span
            base = f"{s.start_line}:{s.start_column}..{s.end_line}:{s.end_column}: {base}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
