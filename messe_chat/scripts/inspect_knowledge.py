#!/usr/bin/env python3
"""
Inspect the composed event knowledge from the command line.

Usage:
  python -m messe_chat.scripts.inspect_knowledge show [event.dates]
  python -m messe_chat.scripts.inspect_knowledge resolve "Dates: [get:event.dates]"
  python -m messe_chat.scripts.inspect_knowledge intent "How much is the title sponsor?"
  python -m messe_chat.scripts.inspect_knowledge parse-csv public/docs/knowledge.csv

Notes:
- Read-only; makes no writes to the overlay table.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from ..knowledge.builder import KnowledgeBuilder
from ..knowledge.csv_overlay import parse_csv_overlay
from ..knowledge.resolver import NotFound, resolve_path, resolve_template
from ..nlu.rules import detect_intent


def line(ch: str = "-", width: int = 60) -> str:
    return ch * width


def dump(value) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def cmd_show(args) -> int:
    builder = KnowledgeBuilder()
    knowledge = asyncio.run(builder.build_knowledge())
    print(line("="))
    print(f"Layers: {', '.join(l.source for l in builder.last_layers) or '(baseline only)'}")
    print(line("="))
    if not args.path:
        print(dump(knowledge))
        return 0
    value = resolve_path(args.path, knowledge)
    if isinstance(value, NotFound):
        print(value.placeholder())
        return 1
    print(value if isinstance(value, str) else dump(value))
    return 0


def cmd_resolve(args) -> int:
    knowledge = asyncio.run(KnowledgeBuilder().build_knowledge())
    print(resolve_template(args.text, knowledge))
    return 0


def cmd_intent(args) -> int:
    result = detect_intent(args.message)
    print(f"intent={result.intent} topic={result.topic}")
    return 0


def cmd_parse_csv(args) -> int:
    with open(args.file, "r", encoding="utf-8", newline="") as f:
        tree = parse_csv_overlay(f.read())
    print(dump(tree))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect event knowledge overlays")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="print the composed knowledge or one dotted path")
    show.add_argument("path", nargs="?")
    show.set_defaults(func=cmd_show)

    resolve = sub.add_parser("resolve", help="resolve [get:...] markers in TEXT")
    resolve.add_argument("text")
    resolve.set_defaults(func=cmd_resolve)

    intent = sub.add_parser("intent", help="classify MESSAGE")
    intent.add_argument("message")
    intent.set_defaults(func=cmd_intent)

    parse_csv = sub.add_parser("parse-csv", help="print the tree a CSV overlay produces")
    parse_csv.add_argument("file")
    parse_csv.set_defaults(func=cmd_parse_csv)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
