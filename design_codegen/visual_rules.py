"""
Visual Rules - Gradient builders, shape geometry and blend-mode tables.

Pure functions and constants consumed by the post-fixes transform. Nothing
here touches the markup tree.

Usage:
    from design_codegen.visual_rules import build_linear_gradient, DEFAULT_MULTI_STOP

    build_linear_gradient(DEFAULT_MULTI_STOP, angle=90)
    # 'linear-gradient(90deg, #be95ff 0%, #ff6b9d 25%, #00d084 50%, #FFD700 100%)'
"""

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class GradientStop:
    """A single color stop (position in percent)."""

    color: str
    position: float


# =============================================================================
# GRADIENTS
# =============================================================================

DEFAULT_MULTI_STOP: Tuple[GradientStop, ...] = (
    GradientStop("#be95ff", 0),
    GradientStop("#ff6b9d", 25),
    GradientStop("#00d084", 50),
    GradientStop("#FFD700", 100),
)
"""Fallback stops when a multi-stop layer carries no stop data."""

DEFAULT_RADIAL_STOPS: Tuple[GradientStop, ...] = (
    GradientStop("#be95ff", 0),
    GradientStop("#ff6b9d", 100),
)

DEFAULT_LINEAR_ANGLE = 90

STOP_PATTERN = re.compile(r"^(?P<color>.+?)(?:\s+(?P<position>-?\d+(?:\.\d+)?)%)?$")


def _format_number(value: float) -> str:
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:g}"


def _split_outside_parens(raw: str, separator: str) -> List[str]:
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for char in raw:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parse_gradient_stops(raw: Optional[str]) -> Optional[List[GradientStop]]:
    """
    Parse ``"#fff 0%, rgba(0,0,0,.5) 50%, #000 100%"`` into stops.

    Stops may be separated by ``;`` or by ``,`` outside parentheses.
    Stops without a position are spread evenly.

    Returns:
        List of at least two stops, or None when the data is unusable
    """
    if not raw or not raw.strip():
        return None

    separator = ";" if ";" in raw else ","
    parts = _split_outside_parens(raw, separator)
    if len(parts) < 2:
        return None

    stops: List[GradientStop] = []
    last_index = len(parts) - 1
    for index, part in enumerate(parts):
        match = STOP_PATTERN.match(part)
        if not match:
            return None
        position = match.group("position")
        stops.append(GradientStop(
            color=match.group("color").strip(),
            position=float(position) if position is not None else index * 100 / last_index,
        ))
    return stops


def format_stops(stops: Sequence[GradientStop]) -> str:
    return ", ".join(f"{stop.color} {_format_number(stop.position)}%" for stop in stops)


def build_linear_gradient(
    stops: Sequence[GradientStop], angle: float = DEFAULT_LINEAR_ANGLE
) -> str:
    return f"linear-gradient({_format_number(angle)}deg, {format_stops(stops)})"


def build_radial_gradient(stops: Sequence[GradientStop], shape: str = "circle") -> str:
    return f"radial-gradient({shape}, {format_stops(stops)})"


def parse_angle(raw: Optional[str]) -> float:
    """``"45"`` or ``"45deg"`` -> 45.0; anything else -> default angle."""
    if raw:
        match = re.match(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:deg)?\s*$", raw)
        if match:
            return float(match.group(1))
    return DEFAULT_LINEAR_ANGLE


# =============================================================================
# SHAPE GEOMETRY
# =============================================================================

Point = Tuple[float, float]


def regular_polygon_points(
    cx: float, cy: float, radius: float, sides: int, rotation: float = -90.0
) -> List[Point]:
    """
    Vertices of a regular polygon, first vertex at ``rotation`` degrees
    (-90 = straight up).
    """
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
    step = 2 * math.pi / sides
    start = math.radians(rotation)
    return [
        (cx + radius * math.cos(start + i * step), cy + radius * math.sin(start + i * step))
        for i in range(sides)
    ]


def star_points(
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float,
    points: int = 5,
) -> List[Point]:
    """Vertices of a star alternating outer and inner radius, tip pointing up."""
    if points < 2:
        raise ValueError(f"A star needs at least 2 points, got {points}")
    if inner_radius >= outer_radius:
        raise ValueError("inner_radius must be smaller than outer_radius")
    step = math.pi / points
    start = -math.pi / 2
    vertices: List[Point] = []
    for i in range(points * 2):
        radius = outer_radius if i % 2 == 0 else inner_radius
        angle = start + i * step
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return vertices


def format_points(points: Sequence[Point]) -> str:
    """SVG ``points`` attribute value."""
    return " ".join(f"{_format_number(x)},{_format_number(y)}" for x, y in points)


# =============================================================================
# BLEND MODES
# =============================================================================

SUPPORTED_BLEND_MODES = frozenset({
    "normal",
    "multiply",
    "screen",
    "overlay",
    "darken",
    "lighten",
    "color-dodge",
    "color-burn",
    "hard-light",
    "soft-light",
    "difference",
    "exclusion",
    "hue",
    "saturation",
    "color",
    "luminosity",
    "plus-darker",
    "plus-lighter",
})
"""Blend modes with a ``mix-blend-*`` utility."""

DEFAULT_BLEND_MODE = "normal"
BLEND_CLASS_PREFIX = "mix-blend-"


def is_supported_blend_mode(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() in SUPPORTED_BLEND_MODES
