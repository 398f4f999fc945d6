"""
Markup - Element tree model plus the BeautifulSoup-backed parser and JSX printer.
"""

from .nodes import (
    CLASS_ATTRIBUTE,
    DATA_NAME_ATTRIBUTE,
    STYLE_ATTRIBUTE,
    Attribute,
    Expression,
    Literal,
    MarkupNode,
    StyleObject,
    TextNode,
)
from .parser import parse_markup, parse_style_declarations
from .printer import print_jsx

__all__ = [
    "CLASS_ATTRIBUTE",
    "DATA_NAME_ATTRIBUTE",
    "STYLE_ATTRIBUTE",
    "Attribute",
    "Expression",
    "Literal",
    "MarkupNode",
    "StyleObject",
    "TextNode",
    "parse_markup",
    "parse_style_declarations",
    "print_jsx",
]
