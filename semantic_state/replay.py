#!/usr/bin/env python3
"""
Stream replay utility.
Feeds a JSON-lines file of embeddings through a StateEngine and prints one result per line,
followed by a final snapshot.

Input lines look like: {"embedding": [0.1, 0.2], "nowMs": 1700000000000}
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from .core.config import SSE_ALPHA, SSE_DRIFT_THRESHOLD, get_health_model
from .core.engine import StateEngine
from .core.errors import SemanticStateError


def replay(lines: TextIO, engine: StateEngine, out: TextIO, snapshot_at: Optional[float] = None) -> int:
    """
    Replay a stream into the engine.

    Rejected lines are reported as {"line": n, "error": "..."} and do not stop the replay.

    Returns:
        Number of rejected lines.
    """
    rejected = 0
    last_now = 0.0

    for line_number, raw in enumerate(lines, start=1):
        raw = raw.strip()
        if not raw:
            continue

        try:
            record = json.loads(raw)
            now_ms = float(record.get("nowMs", last_now))
            result = engine.update(record["embedding"], now_ms)
        except (SemanticStateError, ValueError, KeyError, TypeError, AttributeError) as e:
            rejected += 1
            out.write(json.dumps({"line": line_number, "error": str(e)}) + "\n")
            continue

        last_now = now_ms
        out.write(json.dumps({"line": line_number, **result.to_dict()}) + "\n")

    now = last_now if snapshot_at is None else snapshot_at
    out.write(json.dumps({"snapshot": engine.get_snapshot(now).to_dict()}) + "\n")
    return rejected


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay an embedding stream through the semantic state engine")
    parser.add_argument("input", nargs="?", default="-", help="JSON-lines file of embeddings ('-' for stdin)")
    parser.add_argument("--alpha", type=float, default=SSE_ALPHA, help="EMA weight of each new embedding")
    parser.add_argument("--drift-threshold", type=float, default=SSE_DRIFT_THRESHOLD,
                        help="Cosine similarity below which drift is flagged")
    parser.add_argument("--snapshot-at", type=float, default=None,
                        help="Timestamp (ms) for the final snapshot; defaults to the last update time")
    parser.add_argument("--strict", action="store_true", help="Exit non-zero if any line was rejected")
    args = parser.parse_args(argv)

    try:
        engine = StateEngine(args.alpha, args.drift_threshold, health_model=get_health_model())
    except SemanticStateError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.input == "-":
        rejected = replay(sys.stdin, engine, sys.stdout, args.snapshot_at)
    else:
        with open(args.input, "r", encoding="utf-8") as f:
            rejected = replay(f, engine, sys.stdout, args.snapshot_at)

    if rejected and args.strict:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
