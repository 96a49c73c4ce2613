"""Sphere pattern CLI.

Usage:
    sphereknit --diameter 10 --unit cm --stitches 2.2 --rows 3
    python -m sphereknit.cli --diameter 4 --unit in --stitches 5 --rows 7 --format json

Prints the pattern as prose (default) or as JSON instructions to stdout.
Exit codes: 0 = success, 1 = the sphere cannot be shaped, 2 = invalid input or
settings file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from sphereknit.api.generate import generate_pattern
from sphereknit.errors import InvalidSpec
from sphereknit.settings.registry import load_settings
from sphereknit.writer.writer import TemplateWriter, WriterInput

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sphereknit",
        description="Generate a round-by-round knitting pattern for a sphere",
    )
    parser.add_argument("--diameter", type=float, required=True, help="Sphere diameter")
    parser.add_argument("--unit", type=str, default="in", help="Units: in or cm (default: in)")
    parser.add_argument(
        "--stitches", type=float, required=True, help="Stitch gauge (stitches per unit)"
    )
    parser.add_argument("--rows", type=float, required=True, help="Row gauge (rows per unit)")
    parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )
    parser.add_argument("--settings", type=str, default=None, help="Engine settings YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine attempts")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the sphere pattern generator.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = load_settings(args.settings) if args.settings else None
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    result = generate_pattern(args.diameter, args.unit, args.stitches, args.rows, settings)

    if result.pattern is None:
        print(f"error: {result.error}", file=sys.stderr)
        return 2 if isinstance(result.error, InvalidSpec) else 1

    out = TemplateWriter().write(WriterInput(pattern=result.pattern))
    if args.format == "json":
        payload = {
            "header": out.header,
            "round_count": result.pattern.round_count,
            "attempts": result.pattern.attempts,
            "instructions": [asdict(ins) for ins in out.instructions],
        }
        print(json.dumps(payload, indent=2))
    else:
        print(out.full_pattern)
    logger.debug("wrote %d instructions", len(out.instructions))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
