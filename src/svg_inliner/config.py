"""Conversion options and YAML options-file parsing."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import yaml

ReportFormat = Literal["text", "json"]
REPORT_FORMATS: tuple[str, ...] = ("text", "json")


@dataclass
class InlineOptions:
    """Options controlling how converted markup is emitted."""

    pretty: bool = True
    xml_declaration: bool = False
    report_format: ReportFormat = "text"


def _parse_bool(data: dict, key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise ValueError(f"Option '{key}' must be true or false, got {value!r}")
    return value


def parse_options(data: dict) -> InlineOptions:
    """Build InlineOptions from a dictionary.

    Args:
        data: Option values, either flat or nested under an ``inline`` key.

    Returns:
        Parsed InlineOptions. Missing keys keep their defaults.

    Raises:
        ValueError: If a key is unknown or a value has the wrong type.
    """
    if "inline" in data:
        data = data["inline"]
        if data is None:
            return InlineOptions()
        if not isinstance(data, dict):
            raise ValueError("Section 'inline' must be a YAML dictionary")

    known = {"pretty", "xml_declaration", "report_format"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(map(str, unknown))}")

    options = InlineOptions()
    if "pretty" in data:
        options.pretty = _parse_bool(data, "pretty")
    if "xml_declaration" in data:
        options.xml_declaration = _parse_bool(data, "xml_declaration")
    if "report_format" in data:
        report_format = data["report_format"]
        if report_format not in REPORT_FORMATS:
            raise ValueError(f"Invalid report_format value: {report_format}")
        options.report_format = report_format

    return options


def parse_options_file(options_path: Path) -> InlineOptions:
    """Parse a YAML options file.

    Args:
        options_path: Path to the YAML file.

    Returns:
        Parsed InlineOptions.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the option format is invalid.
    """
    with open(options_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return InlineOptions()
    if not isinstance(data, dict):
        raise ValueError("Options file must be a YAML dictionary")

    return parse_options(data)
