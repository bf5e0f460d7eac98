#!/usr/bin/env python3
"""Count style rules, elements and classed elements in SVG files."""

import argparse
import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_inliner.format import format_input_stats
from svg_inliner.utils import analyze_svg_text, load_svg_file


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        description="Count style rules, elements and classed elements in SVG files."
    )
    parser.add_argument("svg_file", type=Path, help="Path to SVG file to analyze")
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Output file (default: stdout)"
    )

    args = parser.parse_args()

    if not args.svg_file.exists():
        print(f"Error: File not found: {args.svg_file}", file=sys.stderr)
        return 1

    try:
        stats = analyze_svg_text(load_svg_file(args.svg_file))
    except Exception as e:
        print(f"Error: Failed to parse SVG: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        data = {"file": str(args.svg_file), **stats.to_dict()}
        output = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        output = format_input_stats(stats, args.svg_file)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
