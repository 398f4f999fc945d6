"""
Parametrized tests for Tailwind canonicalization.

Each case lists (input class string, expected output, description).
"""

import pytest

from design_codegen.tailwind_rules import (
    TailwindScale,
    canonicalize_token,
    optimize_tailwind_classes,
)


# =============================================================================
# Test Data Definitions
# =============================================================================

CANONICAL_CASES = [
    ("gap-[8px] w-[96px] rounded-[4px]", "gap-2 w-24 rounded", "Spacing, width and bare radius"),
    ("gap-[4px]", "gap-1", "Smallest gap step"),
    ("p-[16px] px-[24px] py-[12px]", "p-4 px-6 py-3", "Padding variants"),
    ("m-[32px]", "m-8", "Margin"),
    ("rounded-[2px]", "rounded-sm", "Small radius"),
    ("rounded-[9999px]", "rounded-full", "Pill radius"),
    ("rounded-t-[8px]", "rounded-t-lg", "Side radius keeps its side"),
    ("w-[16px] h-[16px]", "size-4", "Square pair collapses to size"),
    ("w-[96px] h-[96px] flex", "size-24 flex", "Square pair keeps other tokens"),
    ("h-[24px] w-[24px]", "size-6", "Height before width still collapses"),
    ("md:gap-[8px]", "md:gap-2", "Variant prefix preserved"),
    ("hover:w-[192px]", "hover:w-48", "Hover variant"),
    ("-mt-[8px]", "-mt-2", "Negative margin"),
    ("m-[-8px]", "-m-2", "Negative value inside brackets"),
    ("gap-[0.5rem]", "gap-2", "Rem values convert at 16px"),
    ("w-[1px]", "w-px", "One pixel step"),
    ("gap-[8px]  flex", "gap-2 flex", "Whitespace normalized when a token changes"),
]

UNCHANGED_CASES = [
    ("flex items-center gap-2", "Already canonical"),
    ("w-[100px]", "Off-scale width stays arbitrary"),
    ("w-[13px]", "Off-scale small width"),
    ("rounded-[5px]", "Off-scale radius"),
    ("w-[50%]", "Percent values are not spacing"),
    ("bg-[#ff0000]", "Color arbitrary value"),
    ("font-['Poppins:Bold',sans-serif]", "Font syntax is not a length"),
    ("w-[-8px]", "Width cannot be negative"),
    ("  flex   gap-2  ", "Irregular whitespace kept when nothing converts"),
    ("w-4 h-4", "Canonical pair is not collapsed"),
    ("", "Empty class string"),
]


class TestOptimizeTailwindClasses:
    """Tests for optimize_tailwind_classes."""

    @pytest.mark.parametrize(
        "original,expected,description",
        CANONICAL_CASES,
        ids=[c[2] for c in CANONICAL_CASES],
    )
    def test_canonical_conversion(self, original, expected, description):
        assert optimize_tailwind_classes(original) == expected

    @pytest.mark.parametrize(
        "original,description",
        UNCHANGED_CASES,
        ids=[c[1] for c in UNCHANGED_CASES],
    )
    def test_unchanged_is_byte_identical(self, original, description):
        assert optimize_tailwind_classes(original) == original

    @pytest.mark.parametrize(
        "original",
        [c[0] for c in CANONICAL_CASES] + [c[0] for c in UNCHANGED_CASES],
    )
    def test_idempotent(self, original):
        once = optimize_tailwind_classes(original)
        assert optimize_tailwind_classes(once) == once

    def test_size_collapse_requires_matching_variant(self):
        result = optimize_tailwind_classes("md:w-[16px] h-[16px]")
        assert result == "md:w-4 h-4"

    def test_size_collapse_pairs_each_height_once(self):
        result = optimize_tailwind_classes("w-[16px] w-[16px] h-[16px]")
        assert result == "size-4 w-4"


class TestCanonicalizeToken:
    """Tests for single-token canonicalization."""

    def test_non_arbitrary_token_untouched(self):
        assert canonicalize_token("gap-2") == "gap-2"

    def test_zero_value(self):
        assert canonicalize_token("gap-[0px]") == "gap-0"
        assert canonicalize_token("-m-[0px]") == "m-0"

    def test_unknown_utility_untouched(self):
        assert canonicalize_token("tracking-[8px]") == "tracking-[8px]"


class TestTailwindScale:
    """Tests for TailwindScale helpers."""

    def test_parse_length_px(self):
        assert TailwindScale.parse_length("8px") == 8

    def test_parse_length_rem(self):
        assert TailwindScale.parse_length("1.5rem") == 24

    def test_parse_length_unitless_zero(self):
        assert TailwindScale.parse_length("0") == 0

    def test_parse_length_rejects_other_units(self):
        assert TailwindScale.parse_length("8em") is None
        assert TailwindScale.parse_length("8") is None

    def test_radius_class_bare(self):
        assert TailwindScale.radius_class("rounded", 4) == "rounded"

    def test_radius_class_unknown(self):
        assert TailwindScale.radius_class("rounded", 5) is None
