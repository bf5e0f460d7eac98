"""Structural selector queries over ElementTree documents."""

import logging
from typing import Callable
from xml.etree import ElementTree as ET

import cssselect2

logger = logging.getLogger(__name__)

# query(root, selector) -> matching elements in document order
SelectorQuery = Callable[[ET.Element, str], list[ET.Element]]


def compile_selector(selector: str) -> list:
    """Compile a selector string, returning no selectors if it is unsupported.

    Selectors that do not parse, and selectors targeting pseudo-elements, can
    never match a tree element and compile to an empty list.
    """
    try:
        compiled = cssselect2.compile_selector_list(selector)
    except cssselect2.SelectorError as e:
        logger.warning("Ignoring unsupported selector %r: %s", selector, e)
        return []
    return [sel for sel in compiled if sel.pseudo_element is None]


def css_select(root: ET.Element, selector: str) -> list[ET.Element]:
    """Find all elements under root (root included) matching a CSS selector.

    Args:
        root: Element to search.
        selector: CSS selector, possibly a comma separated group.

    Returns:
        Matching elements in document order, each at most once.
    """
    compiled = compile_selector(selector)
    if not compiled:
        return []

    wrapper = cssselect2.ElementWrapper.from_xml_root(root)
    return [
        element.etree_element
        for element in wrapper.iter_subtree()
        if any(sel.test(element) for sel in compiled)
    ]
