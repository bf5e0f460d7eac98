"""Lenient CSS rule and declaration parsing, and inline style merging.

The parser only splits on braces, semicolons and colons. Comments, nested
braces and quoted strings containing braces are not understood and may corrupt
the block they appear in (and possibly following blocks). Anything that does
not look like ``selector { property: value; ... }`` is dropped silently.
"""

import logging
import re
from dataclasses import dataclass, field
from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)

# selector { declarations }, no nesting
RULE_PATTERN = re.compile(r"([^{}]+)\{([^{}]*)\}")

STYLE_ATTRIBUTE = "style"


@dataclass
class StyleRule:
    """A CSS rule: one selector string and its ordered declarations."""

    selector: str
    declarations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"selector": self.selector, "declarations": dict(self.declarations)}


def parse_declarations(text: str) -> dict[str, str]:
    """Parse ``property:value;...`` text into an ordered property map.

    Fragments without a colon, with an empty property or with an empty value
    are skipped. A repeated property keeps its last value.

    Args:
        text: Declaration text.

    Returns:
        Property map in declaration order.

    Example:
        >>> parse_declarations("color:red;;invalid;fill:green")
        {'color': 'red', 'fill': 'green'}
    """
    declarations: dict[str, str] = {}
    for fragment in text.split(";"):
        colon_index = fragment.find(":")
        if colon_index <= 0:
            if fragment.strip():
                logger.debug("Dropping malformed declaration: %r", fragment)
            continue
        prop = fragment[:colon_index].strip()
        value = fragment[colon_index + 1 :].strip()
        if not prop or not value:
            logger.debug("Dropping empty declaration: %r", fragment)
            continue
        declarations[prop] = value
    return declarations


def parse_inline_style(text: str | None) -> dict[str, str]:
    """Parse a style attribute value, treating None as empty."""
    if not text:
        return {}
    return parse_declarations(text)


def serialize_declarations(declarations: dict[str, str]) -> str:
    """Serialize a property map as ``prop:value;prop:value``."""
    return ";".join(f"{prop}:{value}" for prop, value in declarations.items())


def parse_css(text: str) -> list[StyleRule]:
    """Split raw CSS text into rules.

    Args:
        text: Stylesheet text.

    Returns:
        Rules in source order. Blocks with an empty selector or empty body
        are skipped.
    """
    rules: list[StyleRule] = []
    for match in RULE_PATTERN.finditer(text):
        selector = match.group(1).strip()
        body = match.group(2).strip()
        if not selector or not body:
            logger.debug("Dropping empty CSS block: %r", match.group(0))
            continue
        rules.append(StyleRule(selector=selector, declarations=parse_declarations(body)))
    return rules


def count_css_blocks(text: str) -> int:
    """Count brace-delimited blocks in CSS text without validating them."""
    return len(RULE_PATTERN.findall(text))


def merge_declarations(
    existing: dict[str, str], incoming: dict[str, str]
) -> dict[str, str]:
    """Merge two property maps; incoming values win.

    Properties already present keep their position. New properties are
    appended in incoming order.
    """
    merged = dict(existing)
    merged.update(incoming)
    return merged


def merge_inline_style(element: ET.Element, declarations: dict[str, str]) -> str:
    """Merge declarations into an element's style attribute.

    Args:
        element: Element to update in place.
        declarations: Declarations to apply on top of the current style.

    Returns:
        The new style attribute value.
    """
    current = parse_inline_style(element.get(STYLE_ATTRIBUTE))
    style = serialize_declarations(merge_declarations(current, declarations))
    element.set(STYLE_ATTRIBUTE, style)
    return style
