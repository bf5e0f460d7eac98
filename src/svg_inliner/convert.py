"""Conversion entry points: text in, inlined markup and statistics out."""

from dataclasses import dataclass, field
from pathlib import Path

from .config import InlineOptions
from .format import ConversionStats, compute_stats, format_xml
from .inline import ConversionResult, convert_svg_tree
from .select import SelectorQuery
from .utils import load_svg_file, parse_svg_text, serialize_svg


@dataclass
class ConversionContext:
    """The document being converted and how to emit it.

    Holds everything a conversion reads, so callers (scripts, editors) pass
    state explicitly instead of sharing it.
    """

    source: str
    file_path: Path | None = None
    options: InlineOptions = field(default_factory=InlineOptions)
    query: SelectorQuery | None = None


@dataclass
class ConversionOutput:
    """Result of converting one document."""

    markup: str
    raw_markup: str
    result: ConversionResult
    stats: ConversionStats


def convert(context: ConversionContext) -> ConversionOutput:
    """Convert the document held by a context.

    Args:
        context: Source text, options and selector query.

    Returns:
        ConversionOutput with formatted markup and statistics.

    Raises:
        SVGParseError: If the source is not well-formed or has no svg element.
    """
    svg = parse_svg_text(context.source)
    result = convert_svg_tree(svg, query=context.query)

    raw_markup = serialize_svg(svg, xml_declaration=context.options.xml_declaration)
    markup = format_xml(raw_markup) if context.options.pretty else raw_markup

    return ConversionOutput(
        markup=markup,
        raw_markup=raw_markup,
        result=result,
        stats=compute_stats(result, context.source, markup),
    )


def convert_svg_text(
    text: str,
    options: InlineOptions | None = None,
    query: SelectorQuery | None = None,
) -> ConversionOutput:
    """Convert SVG markup with embedded CSS to inline styles.

    Args:
        text: SVG document text.
        options: Output options (default: InlineOptions()).
        query: Structural selector query (default: css_select).

    Returns:
        ConversionOutput.

    Raises:
        SVGParseError: If the text cannot be parsed.
    """
    context = ConversionContext(
        source=text, options=options or InlineOptions(), query=query
    )
    return convert(context)


def convert_svg_file(
    svg_path: Path, options: InlineOptions | None = None
) -> ConversionOutput:
    """Read an .svg file and convert it.

    Args:
        svg_path: Path to the SVG file.
        options: Output options.

    Returns:
        ConversionOutput.

    Raises:
        ValueError: If the file is not an .svg file.
        FileNotFoundError: If the file does not exist.
        SVGParseError: If the file cannot be parsed.
    """
    context = ConversionContext(
        source=load_svg_file(svg_path),
        file_path=svg_path,
        options=options or InlineOptions(),
    )
    return convert(context)
