from __future__ import annotations

import os

from debugspan import PADDING, debug_span
from debugspan.render import split_lines
from debugspan.testing import generate_cases


def test_generated_cases_are_deterministic() -> None:
    assert generate_cases(seed=7, count=50) == generate_cases(seed=7, count=50)
    assert generate_cases(seed=7, count=50) != generate_cases(seed=8, count=50)


def test_generated_corpus_renders_aligned() -> None:
    seed = int(os.environ.get("DEBUGSPAN_CORPUS_SEED", "1"))
    count = int(os.environ.get("DEBUGSPAN_CORPUS_CASES", "500"))

    kinds = set()
    for src, span in generate_cases(seed=seed, count=count):
        out = debug_span(span, src)
        if span.is_empty():
            kinds.add("empty")
            assert out == ""
            continue

        lines = out.split("\n")
        assert lines[-1] == ""
        width = len(str(span.end_line))
        assert lines[0] == " " * width + "--> " + span.to_range()

        if span.is_single_line():
            kinds.add("single")
            assert len(lines) == 6
            assert lines[3].count("^") == span.end_column - span.start_column
            continue

        kinds.add("multi")
        spanned = split_lines(src)[span.start_line - 1 : span.end_line]
        bar = width + 3 + max(len(s) for s in spanned) + PADDING + 1
        content = lines[3:-3]
        assert len(content) == len(spanned)
        assert {line.index("│") for line in content} == {bar}

    assert kinds == {"empty", "single", "multi"}
