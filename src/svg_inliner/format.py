"""Output formatting: pretty printing, conversion statistics and reports."""

import json
import re
from dataclasses import dataclass
from pathlib import Path

from .inline import ConversionResult
from .utils import InputStats

_TAG_NAME = r"[a-zA-Z0-9]+"
_CLOSE_TAG = rf"</{_TAG_NAME}>"
_OPEN_TAG = rf"<{_TAG_NAME}[^>]*>"

_TAG_BOUNDARY = re.compile(r"><")
_ADJACENT_CLOSE = re.compile(rf"({_CLOSE_TAG})({_CLOSE_TAG})")
_ADJACENT_OPEN = re.compile(rf"({_OPEN_TAG})({_OPEN_TAG})")
_INDENTED_CLOSE = re.compile(rf"  ({_CLOSE_TAG})")


def format_xml(text: str) -> str:
    """Break serialized markup into lines for display.

    This is a text heuristic: every ``><`` boundary becomes a line break and
    an opening tag directly followed by another opening tag indents the
    second by two spaces. Nesting depth is not tracked.

    Args:
        text: Serialized markup.

    Returns:
        Reformatted markup.
    """
    text = _TAG_BOUNDARY.sub(">\n<", text)
    text = _ADJACENT_CLOSE.sub(r"\1\n\2", text)
    text = _ADJACENT_OPEN.sub(r"\1\n  \2", text)
    text = _INDENTED_CLOSE.sub(r"\1", text)
    return text


@dataclass
class ConversionStats:
    """Summary of one conversion for reporting."""

    converted_styles: int
    processed_elements: int
    rule_count: int
    input_size: int
    output_size: int

    @property
    def size_change(self) -> int:
        """Output length minus input length."""
        return self.output_size - self.input_size

    @property
    def size_change_text(self) -> str:
        """Signed size change, e.g. ``+12`` or ``-40``."""
        if self.size_change > 0:
            return f"+{self.size_change}"
        return str(self.size_change)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "converted_styles": self.converted_styles,
            "processed_elements": self.processed_elements,
            "rule_count": self.rule_count,
            "input_size": self.input_size,
            "output_size": self.output_size,
            "size_change": self.size_change,
        }


def compute_stats(
    result: ConversionResult, input_text: str, output_text: str
) -> ConversionStats:
    """Summarize a conversion result and the input/output text lengths."""
    return ConversionStats(
        converted_styles=result.converted_styles,
        processed_elements=result.processed_elements,
        rule_count=len(result.rules),
        input_size=len(input_text),
        output_size=len(output_text),
    )


def format_conversion_report(
    stats: ConversionStats, file_path: Path | None = None
) -> str:
    """Format conversion statistics as text.

    Args:
        stats: Conversion statistics.
        file_path: Source file, if any.

    Returns:
        Formatted text.
    """
    lines: list[str] = []
    if file_path is not None:
        lines.append(f"File: {file_path}")
        lines.append("")

    lines.append("=" * 60)
    lines.append("CONVERSION")
    lines.append("=" * 60)
    lines.append(f"Converted styles: {stats.converted_styles}")
    lines.append(f"Processed elements: {stats.processed_elements}")
    lines.append(f"Size change: {stats.size_change_text} bytes")
    lines.append(f"  Input: {stats.input_size}, Output: {stats.output_size}")

    return "\n".join(lines)


def format_input_stats(stats: InputStats, file_path: Path | None = None) -> str:
    """Format input statistics as text."""
    lines: list[str] = []
    if file_path is not None:
        lines.append(f"File: {file_path}")
    lines.append(f"CSS rules: {stats.css_rules}")
    lines.append(f"Elements: {stats.elements}")
    lines.append(f"Classes: {stats.classes}")
    return "\n".join(lines)


def format_report_json(stats: ConversionStats, file_path: Path | None = None) -> str:
    """Format conversion statistics as JSON."""
    data = stats.to_dict()
    if file_path is not None:
        data = {"file": str(file_path), **data}
    return json.dumps(data, indent=2, ensure_ascii=False)
