"""
hullkit command line: compute a hull for a JSON list of points.

    hullkit convex points.json
    hullkit concave points.json -k 5 --adaptive
    cat points.json | hullkit concave -
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from pydantic import ValidationError

from hullkit.config import configure_logging, settings
from hullkit.engine.pipeline import create_pipeline
from hullkit.models.requests import HullRequest


def load_points(source: str) -> list:
    """Read a JSON array of [x, y] pairs from a path, or stdin for '-'."""
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convex and concave hulls of 2D points")
    parser.add_argument("method", choices=["convex", "concave"], help="Hull algorithm")
    parser.add_argument("input", help="JSON file of [x, y] pairs, or - for stdin")
    parser.add_argument(
        "-k", type=int, default=settings.hullkit_default_k, help="Concave starting search width"
    )
    parser.add_argument(
        "--adaptive", action="store_true", help="Retry with larger k until the boundary closes"
    )
    parser.add_argument("--log-level", help="Override HULLKIT_LOG_LEVEL")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.input != "-" and not os.path.exists(args.input):
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        request = HullRequest(
            method=args.method,
            points=load_points(args.input),
            k=args.k,
            adaptive=args.adaptive,
        )
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    response = create_pipeline().run(request)
    print(response.model_dump_json(indent=2))
    return 1 if response.errors else 0


if __name__ == "__main__":
    sys.exit(main())
