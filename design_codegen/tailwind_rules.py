"""
Tailwind Rules - Canonical Tailwind scales used to rewrite arbitrary values.

Design exports emit bracketed arbitrary values (``gap-[8px]``) even when
the value sits exactly on a Tailwind scale step. This module holds the
scales and the pure canonicalization function used by the optimizer.

Usage:
    from design_codegen.tailwind_rules import optimize_tailwind_classes

    optimize_tailwind_classes("gap-[8px] w-[96px] rounded-[4px]")
    # Returns "gap-2 w-24 rounded"
"""

import re
from typing import Dict, List, Optional, Tuple


class TailwindScale:
    """
    Centralized Tailwind scale definitions.

    All lookups are exact: a value with no canonical step is left as an
    arbitrary value rather than rounded to the nearest step.
    """

    # =========================================================================
    # SPACING (4px base unit)
    # =========================================================================

    SPACING: Dict[float, str] = {
        0: "0",
        1: "px",
        2: "0.5",
        4: "1",
        6: "1.5",
        8: "2",
        10: "2.5",
        12: "3",
        14: "3.5",
        16: "4",
        20: "5",
        24: "6",
        28: "7",
        32: "8",
        36: "9",
        40: "10",
        44: "11",
        48: "12",
        56: "14",
        64: "16",
        80: "20",
        96: "24",
        112: "28",
        128: "32",
        144: "36",
        160: "40",
        176: "44",
        192: "48",
        208: "52",
        224: "56",
        240: "60",
        256: "64",
        288: "72",
        320: "80",
        384: "96",
    }
    """Pixel value -> spacing step."""

    SPACING_UTILITIES = frozenset({
        "w", "h", "min-w", "min-h", "max-h", "size",
        "gap", "gap-x", "gap-y",
        "p", "px", "py", "pt", "pr", "pb", "pl", "ps", "pe",
        "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
        "inset", "inset-x", "inset-y", "top", "right", "bottom", "left",
        "space-x", "space-y",
    })
    """Utilities that take a spacing step."""

    NEGATABLE_UTILITIES = frozenset({
        "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
        "inset", "inset-x", "inset-y", "top", "right", "bottom", "left",
        "space-x", "space-y",
    })
    """Utilities that accept a leading ``-``."""

    # =========================================================================
    # BORDER RADIUS
    # =========================================================================

    RADIUS: Dict[float, str] = {
        0: "none",
        2: "sm",
        4: "",
        6: "md",
        8: "lg",
        12: "xl",
        16: "2xl",
        24: "3xl",
        9999: "full",
    }
    """Pixel value -> radius suffix (empty string = bare ``rounded``)."""

    RADIUS_UTILITIES = frozenset({
        "rounded",
        "rounded-t", "rounded-r", "rounded-b", "rounded-l",
        "rounded-tl", "rounded-tr", "rounded-br", "rounded-bl",
        "rounded-s", "rounded-e",
        "rounded-ss", "rounded-se", "rounded-es", "rounded-ee",
    })

    REM_IN_PX = 16

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    @classmethod
    def parse_length(cls, value: str) -> Optional[float]:
        """
        Parse an arbitrary length into pixels.

        Args:
            value: Bracket content, e.g. '8px', '0.5rem', '0'

        Returns:
            Pixel value or None for unsupported units
        """
        match = LENGTH_PATTERN.match(value.strip())
        if not match:
            return None
        number = float(match.group(1))
        unit = match.group(2)
        if unit == "rem":
            return number * cls.REM_IN_PX
        if unit == "px" or number == 0:
            return number
        return None

    @classmethod
    def spacing_step(cls, px: float) -> Optional[str]:
        return cls.SPACING.get(px)

    @classmethod
    def radius_class(cls, utility: str, px: float) -> Optional[str]:
        suffix = cls.RADIUS.get(px)
        if suffix is None:
            return None
        return f"{utility}-{suffix}" if suffix else utility


TOKEN_PATTERN = re.compile(
    r"^(?P<variants>(?:[\w-]+:)*)"
    r"(?P<negative>-?)"
    r"(?P<utility>[a-z][a-z-]*?)"
    r"-\[(?P<value>[^\]]+)\]$"
)
"""``md:-mt-[8px]`` -> variants='md:', negative='-', utility='mt', value='8px'."""

LENGTH_PATTERN = re.compile(r"^(-?\d*\.?\d+)(px|rem)?$")


def canonicalize_token(token: str) -> str:
    """
    Rewrite a single arbitrary-value class to its canonical form.

    Returns the token unchanged when it has no exact canonical match.
    """
    parsed = _parse_token(token)
    if parsed is None:
        return token
    variants, negative, utility, px = parsed

    if px < 0:
        negative, px = not negative, -px

    if utility in TailwindScale.SPACING_UTILITIES:
        step = TailwindScale.spacing_step(px)
        if step is None:
            return token
        if negative and utility not in TailwindScale.NEGATABLE_UTILITIES:
            return token
        sign = "-" if negative and px != 0 else ""
        return f"{variants}{sign}{utility}-{step}"

    if utility in TailwindScale.RADIUS_UTILITIES and not negative:
        canonical = TailwindScale.radius_class(utility, px)
        if canonical is not None:
            return f"{variants}{canonical}"

    return token


def optimize_tailwind_classes(class_string: str) -> str:
    """
    Replace arbitrary Tailwind values with canonical scale steps.

    - ``w-[N] h-[N]`` pairs sharing a variant collapse to ``size-X``
    - Each remaining token is canonicalized independently
    - When nothing changes, the input is returned byte-identical;
      otherwise tokens are re-joined with single spaces

    Args:
        class_string: Raw class attribute value

    Returns:
        Optimized class string
    """
    tokens = class_string.split()
    optimized = _collapse_size_pairs(tokens)
    optimized = [canonicalize_token(token) for token in optimized]

    if optimized == tokens:
        return class_string
    return " ".join(optimized)


def _parse_token(token: str) -> Optional[Tuple[str, bool, str, float]]:
    match = TOKEN_PATTERN.match(token)
    if not match:
        return None
    px = TailwindScale.parse_length(match.group("value"))
    if px is None:
        return None
    return (
        match.group("variants"),
        match.group("negative") == "-",
        match.group("utility"),
        px,
    )


def _collapse_size_pairs(tokens: List[str]) -> List[str]:
    """Merge matching arbitrary ``w-[N]``/``h-[N]`` pairs into ``size-X``."""
    heights: Dict[Tuple[str, float], List[int]] = {}
    for index, token in enumerate(tokens):
        parsed = _parse_token(token)
        if parsed and parsed[2] == "h" and not parsed[1]:
            heights.setdefault((parsed[0], parsed[3]), []).append(index)

    if not heights:
        return list(tokens)

    result: List[Optional[str]] = list(tokens)
    for index, token in enumerate(tokens):
        parsed = _parse_token(token)
        if not parsed or parsed[2] != "w" or parsed[1]:
            continue
        variants, _, _, px = parsed
        step = TailwindScale.spacing_step(px)
        candidates = heights.get((variants, px))
        if step is None or not candidates:
            continue
        result[index] = f"{variants}size-{step}"
        result[candidates.pop(0)] = None

    return [token for token in result if token is not None]
