"""SVG Inliner - Convert embedded SVG stylesheets to inline style attributes."""

__version__ = "0.1.0"

from .config import (
    InlineOptions,
    parse_options_file,
)
from .css import (
    StyleRule,
    merge_inline_style,
    parse_css,
    parse_declarations,
)
from .convert import (
    ConversionContext,
    ConversionOutput,
    convert,
    convert_svg_file,
    convert_svg_text,
)
from .format import (
    ConversionStats,
    compute_stats,
    format_conversion_report,
    format_xml,
)
from .inline import (
    ConversionResult,
    apply_style_rules,
    convert_svg_tree,
    extract_style_rules,
)
from .select import SelectorQuery, css_select
from .utils import (
    InputStats,
    SVGParseError,
    analyze_svg_text,
)

__all__ = [
    # Config
    "InlineOptions",
    "parse_options_file",
    # CSS
    "StyleRule",
    "merge_inline_style",
    "parse_css",
    "parse_declarations",
    # Conversion
    "ConversionContext",
    "ConversionOutput",
    "ConversionResult",
    "SVGParseError",
    "apply_style_rules",
    "convert",
    "convert_svg_file",
    "convert_svg_text",
    "convert_svg_tree",
    "extract_style_rules",
    # Selector query
    "SelectorQuery",
    "css_select",
    # Formatting and statistics
    "ConversionStats",
    "InputStats",
    "analyze_svg_text",
    "compute_stats",
    "format_conversion_report",
    "format_xml",
]
