"""
Markup Printer - Serialize a MarkupNode tree to JSX.

Literal attributes print as ``name="value"``, expressions as
``name={source}`` and style objects as ``style={{ key: value }}``.
"""

from typing import List, Union

from .nodes import (
    Expression,
    Literal,
    MarkupNode,
    StyleObject,
    StyleValue,
    TextNode,
)
from .parser import FRAGMENT_TAG


def format_style_value(value: StyleValue) -> str:
    """Numbers print bare, strings single-quoted."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_style_object(style: StyleObject) -> str:
    if not len(style):
        return "{{}}"
    body = ", ".join(f"{prop}: {format_style_value(value)}" for prop, value in style.items())
    return "{{ " + body + " }}"


JSX_TEXT_ESCAPES = {
    "<": "{'<'}",
    ">": "{'>'}",
    "{": "{'{'}",
    "}": "{'}'}",
}


def escape_jsx_text(text: str) -> str:
    """Wrap characters JSX reads as syntax in string expressions: ``<`` -> ``{'<'}``."""
    return "".join(JSX_TEXT_ESCAPES.get(char, char) for char in text)


def format_attribute_value(value: Union[Literal, Expression, StyleObject]) -> str:
    if isinstance(value, StyleObject):
        return format_style_object(value)
    if isinstance(value, Expression):
        return "{" + value.source + "}"
    return '"' + value.value.replace('"', "&quot;") + '"'


def print_jsx(node: MarkupNode, indent: int = 2) -> str:
    """
    Serialize a tree to JSX text.

    Whitespace-only text between elements is dropped and replaced by
    indentation; other text is kept, with JSX syntax characters escaped.
    """
    return "\n".join(_print_node(node, 0, indent))


def _open_tag(node: MarkupNode, tag: str) -> str:
    if not node.attributes:
        return f"<{tag}"
    attributes = " ".join(
        f"{attribute.name}={format_attribute_value(attribute.value)}"
        for attribute in node.attributes
    )
    return f"<{tag} {attributes}"


def _print_node(node: MarkupNode, depth: int, indent: int) -> List[str]:
    pad = " " * (depth * indent)
    tag = "" if node.tag == FRAGMENT_TAG else node.tag
    opening = _open_tag(node, tag)

    children = [
        child for child in node.children
        if not (isinstance(child, TextNode) and not child.text.strip())
    ]

    if not children:
        if tag:
            return [f"{pad}{opening} />"]
        return [f"{pad}<></>"]

    if all(isinstance(child, TextNode) for child in children):
        text = escape_jsx_text("".join(child.text for child in children).strip())
        return [f"{pad}{opening}>{text}</{tag}>"]

    lines = [f"{pad}{opening}>"]
    for child in children:
        if isinstance(child, TextNode):
            lines.append(" " * ((depth + 1) * indent) + escape_jsx_text(child.text.strip()))
        else:
            lines.extend(_print_node(child, depth + 1, indent))
    lines.append(f"{pad}</{tag}>")
    return lines
