"""CLI interface for textmask.

Usage:
    # Format whole values
    textmask --mask '+1 (###) ####-###' pretty +12345678901
    textmask --preset country-phone pretty +380441234567

    # Process one edit (stdin: JSON delta, stdout: JSON result)
    echo '{"old_text": "", "old_cursor": 0, "new_text": "13123456", "new_cursor": 8}' | \
        textmask --mask '+1 (###) ####-###' process

    # Replay an edit stream against one engine (JSON lines in, JSON lines out)
    textmask --config mask.yaml replay < edits.jsonl

A delta gives each cursor either as "old_cursor" / "new_cursor" or as a
two-item "old_selection" / "new_selection".
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any, TextIO

from .config import create_engine, read_yaml
from .engine import MaskEngine
from .types import ConfigurationError, CursorRange, EditDelta, FormatResult


def _build_engine(args: argparse.Namespace) -> MaskEngine:
    cfg: dict[str, Any] = read_yaml(args.config) if args.config else {}
    if args.mask:
        cfg["masks"] = args.mask
        cfg.pop("preset", None)
    elif args.preset:
        cfg["preset"] = args.preset
    if args.no_overflow:
        cfg["overflow"] = {"allowed": False}
    if args.autofill:
        cfg["allow_autofill"] = True
    return create_engine(cfg)


def _range(data: dict[str, Any], prefix: str) -> CursorRange:
    if f"{prefix}_selection" in data:
        start, end = data[f"{prefix}_selection"]
        return CursorRange(int(start), int(end))
    text = data.get(f"{prefix}_text", "")
    return CursorRange.collapsed_at(int(data.get(f"{prefix}_cursor", len(text))))


def parse_delta(data: dict[str, Any]) -> EditDelta:
    """Build an EditDelta from its JSON form."""
    return EditDelta(
        old_text=str(data.get("old_text", "")),
        old_range=_range(data, "old"),
        new_text=str(data.get("new_text", "")),
        new_range=_range(data, "new"),
    )


def dump_result(result: FormatResult) -> dict[str, Any]:
    return {
        "text": result.text,
        "cursor": result.cursor_offset,
        "clean": result.clean,
        "valid": result.is_valid,
    }


def cmd_pretty(args: argparse.Namespace, engine: MaskEngine) -> None:
    """Print each value formatted."""
    for value in args.values:
        sys.stdout.write(engine.pretty_text(value) + "\n")


def cmd_process(args: argparse.Namespace, engine: MaskEngine) -> None:
    """Process a single JSON delta from stdin."""
    delta = parse_delta(json.loads(sys.stdin.read()))
    json.dump(dump_result(engine.process(delta)), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def replay(engine: MaskEngine, lines: TextIO, out: TextIO) -> int:
    """Feed JSON-lines deltas through one engine; returns lines processed."""
    count = 0
    for line in lines:
        line = line.strip()
        if not line:
            continue
        result = engine.process(parse_delta(json.loads(line)))
        json.dump(dump_result(result), out, ensure_ascii=False)
        out.write("\n")
        count += 1
    return count


def cmd_replay(args: argparse.Namespace, engine: MaskEngine) -> None:
    """Replay a JSON-lines edit stream from stdin."""
    replay(engine, sys.stdin, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="textmask",
        description="Input masks with cursor-preserving reformatting",
    )
    parser.add_argument("--mask", action="append", default=[], help="Mask template (repeatable)")
    parser.add_argument("--preset", choices=["country-phone"], help="Built-in mask table")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--no-overflow", action="store_true", help="Reject values longer than every mask")
    parser.add_argument("--autofill", action="store_true", help="Autofill constant mask characters")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    pretty = sub.add_parser("pretty", help="Format whole values")
    pretty.add_argument("values", nargs="+")
    sub.add_parser("process", help="Process one JSON delta (stdin)")
    sub.add_parser("replay", help="Process JSON-lines deltas (stdin)")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        engine = _build_engine(args)
    except ConfigurationError as e:
        sys.stderr.write(f"textmask: {e}\n")
        return 2

    cmds = {
        "pretty": cmd_pretty,
        "process": cmd_process,
        "replay": cmd_replay,
    }
    try:
        cmds[args.command](args, engine)
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        sys.stderr.write(f"textmask: bad delta: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
