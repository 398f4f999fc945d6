"""
Shared fixtures for transform pipeline tests.

Provides:
- Element factory for building markup trees without the parser
- Execution contexts with and without a primary font
"""

from typing import Dict, List, Optional, Union

import pytest

from design_codegen.contracts import ExecutionContext, PrimaryFont
from design_codegen.markup import (
    Attribute,
    Expression,
    Literal,
    MarkupNode,
    StyleObject,
    TextNode,
)


AttrValue = Union[str, Expression, StyleObject, Literal]


def build_element(
    tag: str = "div",
    attrs: Optional[Dict[str, AttrValue]] = None,
    children: Optional[List[Union[MarkupNode, TextNode]]] = None,
) -> MarkupNode:
    """Plain strings become Literals; other values are used as-is."""
    attributes = []
    for name, value in (attrs or {}).items():
        if isinstance(value, str):
            value = Literal(value)
        attributes.append(Attribute(name, value))
    return MarkupNode(tag, attributes, list(children or []))


@pytest.fixture
def make_element():
    return build_element


@pytest.fixture
def primary_font() -> PrimaryFont:
    return PrimaryFont(family="Poppins", style="Regular")


@pytest.fixture
def context(primary_font) -> ExecutionContext:
    return ExecutionContext(primary_font=primary_font)


@pytest.fixture
def context_without_font() -> ExecutionContext:
    return ExecutionContext()
