"""
Markup Nodes - Mutable element tree consumed by the transform pipeline.

A MarkupNode has a tag, an ordered attribute list and ordered children.
Attribute values are one of:
- Literal: a plain string value (``className="flex gap-2"``)
- Expression: opaque source that transforms never rewrite (``className={cn(a)}``)
- StyleObject: an inline style declaration (``style={{ fontWeight: 700 }}``)

The tree is owned by a single conversion job and mutated in place by
every transform, so a node handed to a later transform already carries
all earlier rewrites.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union


CLASS_ATTRIBUTE = "className"
STYLE_ATTRIBUTE = "style"
DATA_NAME_ATTRIBUTE = "data-name"

StyleValue = Union[str, int, float]


@dataclass(frozen=True)
class Literal:
    """A literal string attribute value."""

    value: str


@dataclass(frozen=True)
class Expression:
    """An opaque expression attribute value. Never rewritten."""

    source: str


class StyleObject:
    """
    Ordered mapping of camelCase style property -> literal value.

    Usage:
        style = StyleObject({"color": "red"})
        style.prepend(("fontWeight", 700), ("fontFamily", "Poppins, sans-serif"))
        list(style)  # ["fontWeight", "fontFamily", "color"]
    """

    def __init__(self, entries: Optional[Dict[str, StyleValue]] = None):
        self._entries: Dict[str, StyleValue] = dict(entries or {})

    def has(self, prop: str) -> bool:
        return prop in self._entries

    def get(self, prop: str, default: Optional[StyleValue] = None) -> Optional[StyleValue]:
        return self._entries.get(prop, default)

    def set(self, prop: str, value: StyleValue) -> None:
        """Replace an entry in place, or append it."""
        self._entries[prop] = value

    def remove(self, prop: str) -> bool:
        return self._entries.pop(prop, None) is not None

    def prepend(self, *entries: Tuple[str, StyleValue]) -> None:
        """Insert entries before the existing ones, keeping their given order."""
        merged: Dict[str, StyleValue] = dict(entries)
        for prop, value in self._entries.items():
            if prop not in merged:
                merged[prop] = value
        self._entries = merged

    def items(self) -> List[Tuple[str, StyleValue]]:
        return list(self._entries.items())

    def to_dict(self) -> Dict[str, StyleValue]:
        return dict(self._entries)

    def copy(self) -> "StyleObject":
        return StyleObject(self._entries)

    def __contains__(self, prop: object) -> bool:
        return prop in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleObject):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"StyleObject({self._entries!r})"


AttributeValue = Union[Literal, Expression, StyleObject]


@dataclass
class Attribute:
    """A named attribute on an element."""

    name: str
    value: AttributeValue


@dataclass
class TextNode:
    """Raw text between elements."""

    text: str


@dataclass
class MarkupNode:
    """
    Element node with ordered attributes and children.

    Example:
        node = MarkupNode("div", [Attribute("className", Literal("gap-[8px]"))])
        node.class_literal()  # "gap-[8px]"
    """

    tag: str
    attributes: List[Attribute] = field(default_factory=list)
    children: List[Union["MarkupNode", TextNode]] = field(default_factory=list)

    # =========================================================================
    # ATTRIBUTES
    # =========================================================================

    def get_attribute(self, name: str) -> Optional[Attribute]:
        """First attribute with this name, or None."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def attribute_index(self, name: str) -> int:
        """Position of the named attribute, or -1."""
        for index, attribute in enumerate(self.attributes):
            if attribute.name == name:
                return index
        return -1

    def set_attribute(self, name: str, value: AttributeValue) -> Attribute:
        """
        Set an attribute value.

        Replaces the value in place when the attribute exists (keeping its
        position), otherwise appends it as the last attribute.
        """
        attribute = self.get_attribute(name)
        if attribute is not None:
            attribute.value = value
            return attribute
        attribute = Attribute(name, value)
        self.attributes.append(attribute)
        return attribute

    def remove_attribute(self, name: str) -> bool:
        """Remove the named attribute. Returns True if it existed."""
        index = self.attribute_index(name)
        if index == -1:
            return False
        del self.attributes[index]
        return True

    def literal(self, name: str) -> Optional[str]:
        """Literal value of an attribute, or None if absent or not a Literal."""
        attribute = self.get_attribute(name)
        if attribute is not None and isinstance(attribute.value, Literal):
            return attribute.value.value
        return None

    def class_literal(self) -> Optional[str]:
        """The class string, or None when absent or dynamic."""
        return self.literal(CLASS_ATTRIBUTE)

    def style_object(self) -> Optional[StyleObject]:
        """The inline style declaration, or None when absent or not an object."""
        attribute = self.get_attribute(STYLE_ATTRIBUTE)
        if attribute is not None and isinstance(attribute.value, StyleObject):
            return attribute.value
        return None

    @property
    def data_name(self) -> str:
        """Design-layer marker (``data-name``), empty when absent or dynamic."""
        return self.literal(DATA_NAME_ATTRIBUTE) or ""

    # =========================================================================
    # TRAVERSAL
    # =========================================================================

    @property
    def element_children(self) -> List["MarkupNode"]:
        return [child for child in self.children if isinstance(child, MarkupNode)]

    def walk(self) -> Iterator["MarkupNode"]:
        """
        Pre-order traversal over this node and all descendant elements.

        Children are read after the parent has been yielded, so a consumer
        that replaces a node's children sees the new children visited.
        """
        stack: List[MarkupNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.element_children))

    def text_content(self) -> str:
        parts = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.text)
            else:
                parts.append(child.text_content())
        return "".join(parts)

    def __repr__(self) -> str:
        names = [a.name for a in self.attributes]
        return f"MarkupNode(<{self.tag}> attrs={names}, children={len(self.children)})"
