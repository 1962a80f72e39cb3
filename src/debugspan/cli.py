from __future__ import annotations

import argparse
import json
import logging
import sys

from .errors import SpanError
from .render import debug_span
from .spans import parse_range


_log = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="debugspan", description="Show which part of a file a span covers")
    ap.add_argument("file", help="Source file ('-' reads stdin)")
    ap.add_argument("ranges", nargs="+", metavar="RANGE", help="Span as START_LINE:START_COL..END_LINE:END_COL")
    ap.add_argument("--json", action="store_true", help="Print renderings as a JSON list")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"debugspan: cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    _log.debug("read %d characters from %s", len(source), args.file)

    try:
        rendered = [(text, debug_span(parse_range(text), source)) for text in args.ranges]
    except SpanError as e:
        print(f"debugspan: {e}", file=sys.stderr)
        return 2

    if args.json:
        payload = [{"range": text.strip(), "output": out} for text, out in rendered]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for _, out in rendered:
            sys.stdout.write(out)
    return 0
