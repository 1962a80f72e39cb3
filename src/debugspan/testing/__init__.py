from __future__ import annotations

from .corpus import generate_cases

__all__ = ["generate_cases"]
