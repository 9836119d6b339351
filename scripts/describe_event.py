#!/usr/bin/env python3
"""Print the description dictionary for a workflow event.

Shows which fields the schema store knows for an event payload, with
their descriptions, so gaps in the bundled data are easy to spot.

Usage
-----
::

    python scripts/describe_event.py push
    python scripts/describe_event.py pull_request --action opened --json

Options::

    --action NAME        Action to describe (default: every known action)
    --data-dir DIR       Load schema files from DIR instead of package data
    --json               Output the field tree as JSON
    --verbose            Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyeventpayloads import DescriptionDictionary, EventPayloads, PayloadStoreConfig  # noqa: E402
from pyeventpayloads.exceptions import EventPayloadError  # noqa: E402

_TAG_RE = re.compile(r"<[^>]+>")


def _plain(text: str | None) -> str:
    if not text:
        return ""
    return _TAG_RE.sub("", text).strip()


def _print_tree(d: DescriptionDictionary, indent: int = 0) -> None:
    pad = "  " * indent
    for pair in d.pairs():
        description = _plain(pair.description)
        suffix = f"  # {description}" if description else ""
        if isinstance(pair.value, DescriptionDictionary):
            print(f"{pad}{pair.key}:{suffix}")
            _print_tree(pair.value, indent + 1)
        else:
            print(f"{pad}{pair.key}{suffix}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("event", help="Event name, e.g. push")
    parser.add_argument("--action", default=None, help="Action name (default: all)")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory with schema JSON files")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.data_dir is not None:
        overrides["data_dir"] = args.data_dir

    try:
        payloads = EventPayloads(config=PayloadStoreConfig.from_env(**overrides))
    except EventPayloadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    actions = [args.action] if args.action else payloads.get_supported_event_types(args.event)
    if not actions:
        print(f"error: unknown event {args.event!r}", file=sys.stderr)
        return 1

    output: dict[str, Any] = {}
    for action in actions:
        description = payloads.get_event_payload(args.event, action)
        if description is None:
            print(f"error: unknown action {action!r} for {args.event!r}", file=sys.stderr)
            return 1
        if args.json:
            output[action] = description.to_dict()
            continue
        print(f"── {args.event} / {action} ──")
        _print_tree(description, indent=1)
        print()

    if args.json:
        print(json.dumps(output, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
