"""
FontDetectionTransform - Convert design-tool font syntax to inline styles.

    font-['Poppins:Bold',sans-serif] -> style={{ fontFamily: 'Poppins, sans-serif', fontWeight: 700 }}

Priority 0: must run before structural cleaning (10), which strips
``font-[...]`` tokens from class lists.
"""

import logging
import re
from typing import Optional, Tuple

from ..contracts.context import ExecutionContext
from ..contracts.metrics import MetricsRecord
from ..core.config import get_settings
from ..markup.nodes import STYLE_ATTRIBUTE, MarkupNode, StyleObject


logger = logging.getLogger(__name__)


WEIGHT_MAP = {
    "Thin": 100,
    "ExtraLight": 200,
    "Light": 300,
    "Regular": 400,
    "Medium": 500,
    "SemiBold": 600,
    "Bold": 700,
    "ExtraBold": 800,
    "Black": 900,
}
"""Design-tool style name -> CSS font-weight."""

DEFAULT_WEIGHT = 400

FONT_PATTERN = re.compile(r"font-\['([^']+)',sans-serif\]")


def weight_for_style(style: Optional[str]) -> int:
    """Map a style name to a numeric weight, 400 for anything unknown."""
    return WEIGHT_MAP.get(style or "", DEFAULT_WEIGHT)


def parse_font_spec(class_string: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Extract ``(family, style)`` from a class string.

    Returns:
        None when no ``font-['Family:Style',sans-serif]`` token is present
    """
    match = FONT_PATTERN.search(class_string)
    if not match:
        return None
    parts = match.group(1).split(":")
    style = parts[1] if len(parts) > 1 else None
    return parts[0], (style or None)


class FontDetectionTransform:
    """
    Synthesize fontFamily/fontWeight style entries from font class tokens.

    Counting: ``fontsConverted`` counts every element whose class matched,
    including elements whose style already defined a font family and was
    therefore left untouched. Those no-op matches are also counted in
    ``fontMergesSkipped``.
    """

    name = "font-detection"
    priority = 0

    def __init__(self, fallback_family: Optional[str] = None):
        """
        Args:
            fallback_family: Generic family appended to fontFamily values.
                             Defaults to Settings.FONT_FALLBACK.
        """
        self._fallback = fallback_family or get_settings().FONT_FALLBACK

    async def execute(self, tree: MarkupNode, context: ExecutionContext) -> MetricsRecord:
        record = MetricsRecord.of("fontsConverted", "fontMergesSkipped")

        if context.primary_font is None:
            context.logger.info(f"   {self.name}: No primary font found, skipping")
            return record

        for node in tree.walk():
            converted = self.convert_node(node)
            if converted is None:
                continue
            record.increment("fontsConverted")
            if not converted:
                record.increment("fontMergesSkipped")

        context.logger.info(
            f"   {self.name}: Converted {record['fontsConverted']} font declarations"
        )
        return record

    def convert_node(self, node: MarkupNode) -> Optional[bool]:
        """
        Apply the font conversion to one element.

        Returns:
            None if the element has no font token (or a dynamic class),
            True if the style declaration was created or extended,
            False if the match was a no-op
        """
        class_string = node.class_literal()
        if class_string is None:
            return None

        spec = parse_font_spec(class_string)
        if spec is None:
            return None

        family, style = spec
        weight = weight_for_style(style)
        family_value = f"{family}, {self._fallback}"

        attribute = node.get_attribute(STYLE_ATTRIBUTE)
        if attribute is None:
            node.set_attribute(
                STYLE_ATTRIBUTE,
                StyleObject({"fontFamily": family_value, "fontWeight": weight}),
            )
            return True

        if not isinstance(attribute.value, StyleObject):
            logger.debug(f"Dynamic style on <{node.tag}>, font left untouched")
            return False

        if attribute.value.has("fontFamily"):
            return False

        attribute.value.prepend(("fontWeight", weight), ("fontFamily", family_value))
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(priority={self.priority})"
