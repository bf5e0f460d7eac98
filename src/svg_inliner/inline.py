"""Move embedded CSS into inline style attributes.

Conversion runs in three steps over an svg element:

1. extract: collect rules from every ``<style>`` element and detach them
2. structural pass: match each rule's selector against the tree
3. class pass: match ``class`` values literally against ``.name`` and
   ``*[class~="name"]`` selectors, then drop every ``class`` attribute

Matches are always collected before the tree is modified.
"""

import logging
from dataclasses import dataclass, field
from xml.etree import ElementTree as ET

from .css import StyleRule, merge_inline_style, parse_css
from .select import SelectorQuery, css_select
from .utils import get_local_name, is_element

logger = logging.getLogger(__name__)

CLASS_ATTRIBUTE = "class"


@dataclass
class ConversionResult:
    """Counters and rules from one conversion.

    ``converted_styles`` is the number of rules processed. ``processed_elements``
    counts every (rule, element) merge across both passes, so a pair matched by
    both passes is counted twice.
    """

    converted_styles: int = 0
    processed_elements: int = 0
    rules: list[StyleRule] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "converted_styles": self.converted_styles,
            "processed_elements": self.processed_elements,
            "rules": [rule.to_dict() for rule in self.rules],
        }


def build_parent_map(root: ET.Element) -> dict[ET.Element, ET.Element]:
    """Map each element under root to its parent."""
    return {child: parent for parent in root.iter() for child in parent}


def detach_element(parent: ET.Element, element: ET.Element) -> None:
    """Remove element from parent, keeping the text that follows it.

    ElementTree stores trailing text in ``element.tail``; it is moved to the
    previous sibling's tail, or to ``parent.text`` for a first child.
    """
    if element.tail:
        children = list(parent)
        index = children.index(element)
        if index > 0:
            previous = children[index - 1]
            previous.tail = (previous.tail or "") + element.tail
        else:
            parent.text = (parent.text or "") + element.tail
    parent.remove(element)


def extract_style_rules(root: ET.Element) -> list[StyleRule]:
    """Parse and remove all style elements under root.

    Args:
        root: svg element, modified in place.

    Returns:
        Rules from all style elements in document order.
    """
    parents = build_parent_map(root)
    style_elements = [
        elem
        for elem in root.iter()
        if elem is not root and is_element(elem) and get_local_name(elem.tag) == "style"
    ]

    rules: list[StyleRule] = []
    for style_elem in style_elements:
        rules.extend(parse_css("".join(style_elem.itertext())))

    for style_elem in style_elements:
        parent = parents[style_elem]
        # a style nested in a removed style has already left the tree
        if style_elem in list(parent):
            detach_element(parent, style_elem)

    logger.debug(
        "Extracted %d rule(s) from %d style element(s)", len(rules), len(style_elements)
    )
    return rules


def class_selectors(token: str) -> tuple[str, str]:
    """Selector spellings the class pass treats as matching a class value."""
    return f".{token}", f'*[class~="{token}"]'


def apply_style_rules(
    root: ET.Element,
    rules: list[StyleRule],
    query: SelectorQuery | None = None,
) -> ConversionResult:
    """Apply rules to matching elements and strip class attributes.

    Args:
        root: svg element with style elements already removed.
        rules: Rules to apply, in priority order (later wins).
        query: Structural selector query (default: css_select).

    Returns:
        ConversionResult with counters. ``rules`` is left empty.
    """
    result = ConversionResult()

    # Structural pass
    query = query or css_select
    planned = [(rule, query(root, rule.selector)) for rule in rules]
    for rule, elements in planned:
        for element in elements:
            merge_inline_style(element, rule.declarations)
            result.processed_elements += 1
        result.converted_styles += 1

    # Class pass
    classed = [
        elem
        for elem in root.iter()
        if is_element(elem) and CLASS_ATTRIBUTE in elem.attrib
    ]
    for element in classed:
        token = element.get(CLASS_ATTRIBUTE)
        if not token:
            continue
        selectors = class_selectors(token)
        for rule in rules:
            if rule.selector in selectors:
                merge_inline_style(element, rule.declarations)
                result.processed_elements += 1

    for element in classed:
        del element.attrib[CLASS_ATTRIBUTE]

    return result


def convert_svg_tree(
    root: ET.Element, query: SelectorQuery | None = None
) -> ConversionResult:
    """Convert embedded CSS under an svg element to inline styles in place.

    Args:
        root: svg element to convert.
        query: Structural selector query (default: css_select).

    Returns:
        ConversionResult including the extracted rules.
    """
    rules = extract_style_rules(root)
    result = apply_style_rules(root, rules, query=query)
    result.rules = rules
    return result
