"""Tests for svg_inliner.format module."""

import json
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_inliner.css import StyleRule
from svg_inliner.format import (
    ConversionStats,
    compute_stats,
    format_conversion_report,
    format_input_stats,
    format_report_json,
    format_xml,
)
from svg_inliner.inline import ConversionResult
from svg_inliner.utils import InputStats


class TestFormatXml:
    """Tests for format_xml function."""

    def test_breaks_between_tags(self):
        text = '<svg><g><rect style="fill:red" /></g></svg>'
        assert format_xml(text) == (
            '<svg>\n<g>\n<rect style="fill:red" />\n</g>\n</svg>'
        )

    def test_no_depth_tracking(self):
        text = "<svg><g><g><rect /></g></g></svg>"
        lines = format_xml(text).split("\n")
        assert all(not line.startswith(" ") for line in lines)

    def test_text_content_untouched(self):
        text = "<svg><text>Hello SVG!</text></svg>"
        assert format_xml(text) == "<svg>\n<text>Hello SVG!</text>\n</svg>"

    def test_indent_before_closing_tag_stripped(self):
        text = "<svg>\n  <g>\n  </g>\n</svg>"
        assert format_xml(text) == "<svg>\n  <g>\n</g>\n</svg>"

    def test_empty(self):
        assert format_xml("") == ""

    def test_single_line_no_tags(self):
        assert format_xml("plain text") == "plain text"


class TestConversionStats:
    """Tests for ConversionStats dataclass."""

    @pytest.mark.parametrize(
        "input_size, output_size, change, text",
        [
            (100, 120, 20, "+20"),
            (120, 100, -20, "-20"),
            (50, 50, 0, "0"),
        ],
    )
    def test_size_change(self, input_size, output_size, change, text):
        stats = ConversionStats(
            converted_styles=0,
            processed_elements=0,
            rule_count=0,
            input_size=input_size,
            output_size=output_size,
        )
        assert stats.size_change == change
        assert stats.size_change_text == text

    def test_to_dict(self):
        stats = ConversionStats(
            converted_styles=2,
            processed_elements=3,
            rule_count=2,
            input_size=10,
            output_size=7,
        )
        assert stats.to_dict() == {
            "converted_styles": 2,
            "processed_elements": 3,
            "rule_count": 2,
            "input_size": 10,
            "output_size": 7,
            "size_change": -3,
        }


class TestComputeStats:
    """Tests for compute_stats function."""

    def test_copies_counters(self):
        result = ConversionResult(
            converted_styles=2,
            processed_elements=5,
            rules=[StyleRule(".a", {"x": "1"}), StyleRule(".b", {"y": "2"})],
        )
        stats = compute_stats(result, "abcdef", "abc")
        assert stats.converted_styles == 2
        assert stats.processed_elements == 5
        assert stats.rule_count == 2
        assert stats.size_change == -3

    def test_result_not_modified(self):
        result = ConversionResult(converted_styles=1, processed_elements=1)
        compute_stats(result, "a", "ab")
        assert result == ConversionResult(converted_styles=1, processed_elements=1)


class TestReports:
    """Tests for report formatting functions."""

    @pytest.fixture
    def stats(self) -> ConversionStats:
        return ConversionStats(
            converted_styles=4,
            processed_elements=8,
            rule_count=4,
            input_size=500,
            output_size=480,
        )

    def test_text_report(self, stats):
        report = format_conversion_report(stats, Path("icon.svg"))
        assert report.startswith("File: icon.svg")
        assert "Converted styles: 4" in report
        assert "Processed elements: 8" in report
        assert "Size change: -20 bytes" in report

    def test_text_report_without_file(self, stats):
        report = format_conversion_report(stats)
        assert "File:" not in report

    def test_json_report(self, stats):
        data = json.loads(format_report_json(stats, Path("icon.svg")))
        assert data["file"] == "icon.svg"
        assert data["size_change"] == -20

    def test_input_stats(self):
        text = format_input_stats(InputStats(css_rules=3, elements=7, classes=2))
        assert text.split("\n") == ["CSS rules: 3", "Elements: 7", "Classes: 2"]
