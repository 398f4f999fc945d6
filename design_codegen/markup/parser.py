"""
Markup Parser - Build a MarkupNode tree from generated design markup.

Wraps BeautifulSoup (html.parser) and maps its tags onto the pipeline's
own tree so transforms can tell literals, expressions and style objects
apart:

- ``class`` / ``className`` -> ``className`` Literal
- ``style="color: red; font-size: 12px"`` -> StyleObject({"color": "red", "fontSize": "12px"})
- any value wrapped in braces (``{styles.card}``) -> Expression

Usage:
    from design_codegen.markup import parse_markup

    tree = parse_markup('<div class="gap-[8px]" data-name="Frame">Hi</div>')
    tree.class_literal()  # "gap-[8px]"
"""

import logging
import re
from typing import Dict, List, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..contracts.errors import MarkupParseError
from .nodes import (
    CLASS_ATTRIBUTE,
    STYLE_ATTRIBUTE,
    Attribute,
    AttributeValue,
    Expression,
    Literal,
    MarkupNode,
    StyleObject,
    TextNode,
)


logger = logging.getLogger(__name__)


FRAGMENT_TAG = "fragment"
"""Tag of the synthetic root used when the source has several top-level elements."""

# html.parser lowercases attribute names; restore the JSX spelling
ATTRIBUTE_ALIASES: Dict[str, str] = {
    "class": CLASS_ATTRIBUTE,
    "classname": CLASS_ATTRIBUTE,
    "for": "htmlFor",
    "viewbox": "viewBox",
    "stroke-width": "strokeWidth",
    "strokewidth": "strokeWidth",
    "fill-rule": "fillRule",
    "clip-rule": "clipRule",
    "preserveaspectratio": "preserveAspectRatio",
}

EXPRESSION_PATTERN = re.compile(r"^\{(.*)\}$", re.DOTALL)
DECLARATION_PATTERN = re.compile(r"^\s*([-\w]+)\s*:\s*(.+?)\s*$", re.DOTALL)


def css_property_to_camel(prop: str) -> str:
    """``font-family`` -> ``fontFamily``; custom properties are kept as-is."""
    if prop.startswith("--"):
        return prop
    head, *rest = prop.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def parse_style_declarations(css: str) -> StyleObject:
    """
    Parse an inline CSS declaration list into a StyleObject.

    Malformed declarations (no colon) are dropped.
    """
    style = StyleObject()
    for declaration in _split_declarations(css):
        match = DECLARATION_PATTERN.match(declaration)
        if not match:
            if declaration.strip():
                logger.debug(f"Dropping malformed style declaration: {declaration!r}")
            continue
        style.set(css_property_to_camel(match.group(1)), match.group(2))
    return style


def _split_declarations(css: str) -> List[str]:
    """Split on ``;`` outside parentheses (gradients contain no ``;`` but urls may)."""
    parts: List[str] = []
    depth = 0
    current = []
    for char in css:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        if char == ";" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def convert_attribute(name: str, raw: str) -> Attribute:
    """Map one raw HTML attribute onto the tree's attribute model."""
    name = ATTRIBUTE_ALIASES.get(name, name)
    value: AttributeValue

    expression = EXPRESSION_PATTERN.match(raw.strip())
    if expression:
        value = Expression(expression.group(1).strip())
    elif name == STYLE_ATTRIBUTE:
        value = parse_style_declarations(raw)
    else:
        value = Literal(raw)

    return Attribute(name, value)


def convert_tag(tag: Tag) -> MarkupNode:
    """Recursively convert a BeautifulSoup Tag."""
    attributes = [convert_attribute(name, _raw_value(raw)) for name, raw in tag.attrs.items()]
    node = MarkupNode(tag.name, attributes)

    for child in tag.children:
        converted = _convert_child(child)
        if converted is not None:
            node.children.append(converted)

    return node


def parse_markup(source: str) -> MarkupNode:
    """
    Parse markup text into a MarkupNode tree.

    Returns the single top-level element, or a ``fragment`` node wrapping
    several top-level elements.

    Raises:
        MarkupParseError: If the source contains no element
    """
    soup = BeautifulSoup(source, "html.parser", multi_valued_attributes=None)

    top_level = [_convert_child(child) for child in soup.children]
    top_level = [node for node in top_level if node is not None]
    elements = [node for node in top_level if isinstance(node, MarkupNode)]

    if not elements:
        raise MarkupParseError("No element found in markup", source_excerpt=source[:80])

    if len(elements) == 1 and all(
        isinstance(node, MarkupNode) or not node.text.strip() for node in top_level
    ):
        return elements[0]

    logger.debug(f"Wrapping {len(elements)} top-level elements in a fragment")
    return MarkupNode(FRAGMENT_TAG, children=top_level)


def _convert_child(child) -> Union[MarkupNode, TextNode, None]:
    if isinstance(child, Tag):
        return convert_tag(child)
    if isinstance(child, PreformattedString):
        # comments, doctype, CDATA
        return None
    if isinstance(child, NavigableString):
        return TextNode(str(child))
    return None


def _raw_value(raw) -> str:
    if isinstance(raw, (list, tuple)):
        return " ".join(raw)
    return "" if raw is None else str(raw)
