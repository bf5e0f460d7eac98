"""Utility functions for SVG parsing, serialization and analysis."""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator
from xml.etree import ElementTree as ET

from .css import count_css_blocks

# SVG namespace mappings
SVG_NAMESPACES = {
    "svg": "http://www.w3.org/2000/svg",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "xlink": "http://www.w3.org/1999/xlink",
}

SVG_SUFFIX = ".svg"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class SVGParseError(ValueError):
    """Raised when input text is not well-formed XML or has no svg element."""


def register_namespaces() -> None:
    """Register SVG namespaces to preserve prefixes when writing."""
    for prefix, uri in SVG_NAMESPACES.items():
        ET.register_namespace(prefix, uri)


def get_local_name(tag: str) -> str:
    """Extract local name from a namespaced tag.

    Args:
        tag: Full tag name, possibly with namespace.

    Returns:
        Local name without namespace prefix.

    Example:
        >>> get_local_name("{http://www.w3.org/2000/svg}rect")
        'rect'
    """
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def is_element(node: ET.Element) -> bool:
    """Check if a tree node is an element (not a comment or PI)."""
    return isinstance(node.tag, str)


def find_svg_root(root: ET.Element) -> ET.Element | None:
    """Locate the svg element to convert.

    Args:
        root: Document root element.

    Returns:
        The root itself when it is an svg element, otherwise the first svg
        descendant in document order, or None if there is none.
    """
    for elem in root.iter():
        if is_element(elem) and get_local_name(elem.tag) == "svg":
            return elem
    return None


def parse_svg_text(text: str) -> ET.Element:
    """Parse SVG markup and return the svg element.

    Args:
        text: SVG document text.

    Returns:
        The svg element of the parsed document.

    Raises:
        SVGParseError: If the text is not well-formed XML or contains no svg
            element.
    """
    register_namespaces()
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as e:
        raise SVGParseError(f"Invalid SVG format: {e}") from e

    svg = find_svg_root(root)
    if svg is None:
        raise SVGParseError("No SVG element found")
    return svg


def uses_default_namespace(svg: ET.Element) -> bool:
    """Check if svg can be written with SVG as the default namespace.

    ElementTree cannot write ``xmlns=""``, so a tree in the SVG namespace that
    also holds unqualified elements (e.g. inside ``foreignObject``) has to keep
    the ``svg:`` prefix to round-trip.
    """
    if not svg.tag.startswith(f"{{{SVG_NAMESPACES['svg']}}}"):
        return False
    return all(elem.tag.startswith("{") for elem in svg.iter() if is_element(elem))


def serialize_svg(svg: ET.Element, xml_declaration: bool = False) -> str:
    """Serialize an svg element to markup text.

    The SVG namespace is written as the default namespace when possible, so
    documents come out as ``<svg xmlns="...">`` instead of ``<svg:svg>``. The
    default-prefix registration only lasts for this call. Text following the
    svg element in its parent is not written.

    Args:
        svg: Element to serialize.
        xml_declaration: Whether to prefix the output with an XML declaration.

    Returns:
        Serialized markup.
    """
    register_namespaces()
    root = copy.copy(svg)
    root.tail = None

    default_namespace = uses_default_namespace(svg)
    if default_namespace:
        ET.register_namespace("", SVG_NAMESPACES["svg"])
    try:
        text = ET.tostring(root, encoding="unicode")
    finally:
        if default_namespace:
            ET.register_namespace("svg", SVG_NAMESPACES["svg"])
    if xml_declaration:
        return f"{XML_DECLARATION}\n{text}"
    return text


def load_svg_file(file_path: Path) -> str:
    """Read an SVG file as text.

    Args:
        file_path: Path to the SVG file.

    Returns:
        File contents.

    Raises:
        ValueError: If the file name does not end in ``.svg``.
        FileNotFoundError: If the file does not exist.
    """
    if not file_path.name.lower().endswith(SVG_SUFFIX):
        raise ValueError(f"Please select an SVG file: {file_path.name}")
    return file_path.read_text(encoding="utf-8")


@dataclass
class InputStats:
    """Statistics for an unconverted SVG document."""

    css_rules: int = 0
    elements: int = 0
    classes: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "css_rules": self.css_rules,
            "elements": self.elements,
            "classes": self.classes,
        }


def iter_descendants(svg: ET.Element) -> Iterator[ET.Element]:
    """Iterate over element descendants of svg, excluding svg itself."""
    for elem in svg.iter():
        if elem is not svg and is_element(elem):
            yield elem


def analyze_svg_tree(svg: ET.Element) -> InputStats:
    """Count style rules, elements and classed elements under an svg element.

    Args:
        svg: The svg element.

    Returns:
        InputStats for the tree.
    """
    stats = InputStats()
    for elem in iter_descendants(svg):
        stats.elements += 1
        if elem.get("class") is not None:
            stats.classes += 1
        if get_local_name(elem.tag) == "style":
            stats.css_rules += count_css_blocks("".join(elem.itertext()))
    return stats


def analyze_svg_text(text: str) -> InputStats:
    """Analyze SVG markup without converting it.

    Args:
        text: SVG document text.

    Returns:
        InputStats, all zero for blank input.

    Raises:
        SVGParseError: If the text cannot be parsed.
    """
    if not text.strip():
        return InputStats()
    return analyze_svg_tree(parse_svg_text(text))
