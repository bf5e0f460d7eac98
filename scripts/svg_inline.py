#!/usr/bin/env python3
"""Convert embedded SVG stylesheets to inline style attributes."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_inliner.config import InlineOptions, parse_options_file
from svg_inliner.convert import ConversionContext, convert
from svg_inliner.format import format_conversion_report, format_report_json
from svg_inliner.utils import SVGParseError, load_svg_file


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O or file type error
        - 2: Options file error
        - 3: SVG parse error
    """
    parser = argparse.ArgumentParser(
        description="Convert embedded SVG stylesheets to inline style attributes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print converted markup, report on stderr
  %(prog)s input.svg

  # Write output file
  %(prog)s input.svg --output output.svg

  # Compact output with JSON report
  %(prog)s input.svg --output output.svg --no-pretty --report json
""",
    )
    parser.add_argument("svg_file", type=Path, help="Path to SVG file to convert")
    parser.add_argument("--output", "-o", type=Path, help="Output SVG file")
    parser.add_argument(
        "--options", type=Path, help="YAML options file (pretty, xml_declaration, report_format)"
    )
    parser.add_argument(
        "--no-pretty", action="store_true", help="Write serializer output unformatted"
    )
    parser.add_argument(
        "--report",
        "-r",
        choices=["text", "json"],
        help="Report format (default: text)",
    )
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress the report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log dropped CSS")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.svg_file.exists():
        print(f"Error: SVG file not found: {args.svg_file}", file=sys.stderr)
        return 1

    # Options
    options = InlineOptions()
    if args.options is not None:
        try:
            options = parse_options_file(args.options)
        except Exception as e:
            print(f"Error: Failed to parse options file: {e}", file=sys.stderr)
            return 2
    if args.no_pretty:
        options.pretty = False
    if args.report is not None:
        options.report_format = args.report

    try:
        source = load_svg_file(args.svg_file)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    context = ConversionContext(source=source, file_path=args.svg_file, options=options)
    try:
        output = convert(context)
    except SVGParseError as e:
        print(f"Error: Conversion failed: {e}", file=sys.stderr)
        return 3

    if options.report_format == "json":
        report = format_report_json(output.stats, args.svg_file)
    else:
        report = format_conversion_report(output.stats, args.svg_file)

    if args.output:
        try:
            args.output.write_text(output.markup, encoding="utf-8")
        except OSError as e:
            print(f"Error: Failed to write output: {e}", file=sys.stderr)
            return 1
        if not args.quiet:
            print(report)
            print(f"\nOutput written to: {args.output}")
    else:
        print(output.markup)
        if not args.quiet:
            print(report, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
