"""Command line for inspecting formatters.

Commands:
- show: print every registry printer rendering one instant
- parse: parse a text with a pattern, or by guessing from the registry
- format: render an instant with a pattern

Examples:
    python -m datefmt show --at 2010-10-03T14:30:00.000Z
    python -m datefmt parse 20100311
    python -m datefmt parse "Sun, 03 Oct 2010 14:30:00 Z" --explain
    python -m datefmt format "dow, MMMM dth yyyy"
"""

from __future__ import annotations

import argparse
import logging
import sys

from datefmt.core.datetime import DateTime
from datefmt.errors import DateFormatError
from datefmt.format.formatter import InstantKind, formatter
from datefmt.format.parse import parse, parse_attempts, parse_local, parse_local_date
from datefmt.format.registry import show_formatters
from datefmt.format.unparse import unparse


def _instant(text: str | None) -> DateTime:
    if text is None:
        return DateTime.utc_now()
    value = parse(text)
    if not isinstance(value, DateTime):
        raise SystemExit(f"cannot read an instant from {text!r}")
    return value


def cmd_parse(text: str, pattern: str | None, kind: InstantKind, explain: bool) -> int:
    if explain:
        for attempt in parse_attempts(text, kind):
            outcome = attempt.value if attempt.ok else attempt.failure
            print(f"{attempt.name:<40}{outcome}")

    readers = {
        InstantKind.UTC: parse,
        InstantKind.LOCAL: parse_local,
        InstantKind.DATE: parse_local_date,
    }
    read = readers[kind]
    try:
        value = read(formatter(pattern), text) if pattern is not None else read(text)
    except DateFormatError as e:
        print(f"{e.kind}: {e}", file=sys.stderr)
        return 1

    if value is None:
        print(f"no formatter matched {text!r}", file=sys.stderr)
        return 1
    print(value)
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="datefmt")
    ap.add_argument("-v", "--verbose", action="store_true", help="log every parse attempt")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_show = sub.add_parser("show")
    p_show.add_argument("--at", help="instant to render (default: now)")

    p_parse = sub.add_parser("parse")
    p_parse.add_argument("text")
    p_parse.add_argument("--pattern", help="parse with this pattern instead of guessing")
    shape = p_parse.add_mutually_exclusive_group()
    shape.add_argument("--local", action="store_true", help="build a zone-naive value")
    shape.add_argument("--date", action="store_true", help="build a date-only value")
    p_parse.add_argument("--explain", action="store_true", help="list every registry attempt")

    p_format = sub.add_parser("format")
    p_format.add_argument("pattern")
    p_format.add_argument("--at", help="instant to render (default: now)")

    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.cmd == "show":
        show_formatters(_instant(args.at))
        return 0

    if args.cmd == "parse":
        kind = InstantKind.UTC
        if args.local:
            kind = InstantKind.LOCAL
        elif args.date:
            kind = InstantKind.DATE
        return cmd_parse(args.text, args.pattern, kind, args.explain)

    if args.cmd == "format":
        try:
            print(unparse(formatter(args.pattern), _instant(args.at)))
        except DateFormatError as e:
            print(f"{e.kind}: {e}", file=sys.stderr)
            return 1
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
