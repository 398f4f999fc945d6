"""
Tests for FontDetectionTransform.
"""

import pytest

from design_codegen.markup import Expression, StyleObject
from design_codegen.transforms.font_detection import (
    FontDetectionTransform,
    parse_font_spec,
    weight_for_style,
)


WEIGHT_CASES = [
    ("Thin", 100),
    ("ExtraLight", 200),
    ("Light", 300),
    ("Regular", 400),
    ("Medium", 500),
    ("SemiBold", 600),
    ("Bold", 700),
    ("ExtraBold", 800),
    ("Black", 900),
]


class TestWeightForStyle:
    """Tests for the style -> weight table."""

    @pytest.mark.parametrize("style,weight", WEIGHT_CASES)
    def test_known_styles(self, style, weight):
        assert weight_for_style(style) == weight

    @pytest.mark.parametrize("style", ["Italic", "bold", "Semi Bold", "", None])
    def test_unknown_styles_default_to_400(self, style):
        assert weight_for_style(style) == 400


class TestParseFontSpec:
    """Tests for font class parsing."""

    def test_family_and_style(self):
        assert parse_font_spec("text-sm font-['Poppins:Bold',sans-serif]") == ("Poppins", "Bold")

    def test_family_without_style(self):
        assert parse_font_spec("font-['Inter',sans-serif]") == ("Inter", None)

    def test_family_with_spaces(self):
        assert parse_font_spec("font-['Open Sans:SemiBold',sans-serif]") == ("Open Sans", "SemiBold")

    def test_extra_segments_ignored(self):
        assert parse_font_spec("font-['Inter:Bold:Italic',sans-serif]") == ("Inter", "Bold")

    def test_no_match(self):
        assert parse_font_spec("font-bold text-lg") is None


class TestFontDetectionTransform:
    """Tests for the font-detection pass."""

    @pytest.mark.asyncio
    async def test_creates_style_when_absent(self, make_element, context):
        """Poppins:Bold with no style -> new style declaration appended last."""
        node = make_element(attrs={
            "className": "font-['Poppins:Bold',sans-serif]",
            "data-name": "Title",
        })

        record = await FontDetectionTransform().execute(node, context)

        assert record["fontsConverted"] == 1
        assert record["fontMergesSkipped"] == 0
        assert node.attributes[-1].name == "style"
        assert node.style_object().to_dict() == {
            "fontFamily": "Poppins, sans-serif",
            "fontWeight": 700,
        }

    @pytest.mark.asyncio
    async def test_existing_font_family_untouched_but_counted(self, make_element, context):
        """A matched element with fontFamily already set is a counted no-op."""
        style = StyleObject({"fontFamily": "Arial", "color": "red"})
        node = make_element(attrs={
            "className": "font-['Arial:Regular',sans-serif]",
            "style": style,
        })

        record = await FontDetectionTransform().execute(node, context)

        assert node.style_object().to_dict() == {"fontFamily": "Arial", "color": "red"}
        assert record["fontsConverted"] == 1
        assert record["fontMergesSkipped"] == 1

    @pytest.mark.asyncio
    async def test_prepends_into_existing_style(self, make_element, context):
        node = make_element(attrs={
            "className": "font-['Inter:Medium',sans-serif]",
            "style": StyleObject({"color": "red"}),
        })

        await FontDetectionTransform().execute(node, context)

        assert node.style_object().items() == [
            ("fontWeight", 500),
            ("fontFamily", "Inter, sans-serif"),
            ("color", "red"),
        ]

    @pytest.mark.asyncio
    async def test_skips_whole_tree_without_primary_font(self, make_element, context_without_font):
        node = make_element(attrs={"className": "font-['Poppins:Bold',sans-serif]"})

        record = await FontDetectionTransform().execute(node, context_without_font)

        assert record["fontsConverted"] == 0
        assert node.get_attribute("style") is None

    @pytest.mark.asyncio
    async def test_dynamic_class_is_ignored(self, make_element, context):
        node = make_element(attrs={"className": Expression("cn(\"font-['Poppins:Bold',sans-serif]\")")})

        record = await FontDetectionTransform().execute(node, context)

        assert record["fontsConverted"] == 0
        assert node.get_attribute("style") is None

    @pytest.mark.asyncio
    async def test_dynamic_style_left_untouched(self, make_element, context):
        node = make_element(attrs={
            "className": "font-['Poppins:Bold',sans-serif]",
            "style": Expression("styles.title"),
        })

        record = await FontDetectionTransform().execute(node, context)

        assert node.get_attribute("style").value == Expression("styles.title")
        assert record["fontMergesSkipped"] == 1

    @pytest.mark.asyncio
    async def test_counts_every_matching_descendant(self, make_element, context):
        tree = make_element(children=[
            make_element("h1", {"className": "font-['Poppins:Bold',sans-serif]"}),
            make_element("p", {"className": "font-['Poppins:Light',sans-serif]"}),
            make_element("span", {"className": "text-sm"}),
        ])

        record = await FontDetectionTransform().execute(tree, context)

        assert record["fontsConverted"] == 2
        assert tree.children[1].style_object().get("fontWeight") == 300

    @pytest.mark.asyncio
    async def test_idempotent(self, make_element, context):
        node = make_element(attrs={"className": "font-['Poppins:Bold',sans-serif]"})
        transform = FontDetectionTransform()

        await transform.execute(node, context)
        snapshot = [(a.name, a.value) for a in node.attributes]
        snapshot_style = node.style_object().copy()
        await transform.execute(node, context)

        assert [a.name for a in node.attributes] == [name for name, _ in snapshot]
        assert node.style_object() == snapshot_style

    @pytest.mark.asyncio
    async def test_primary_font_not_modified(self, make_element, context, primary_font):
        node = make_element(attrs={"className": "font-['Inter:Bold',sans-serif]"})

        await FontDetectionTransform().execute(node, context)

        assert context.primary_font == primary_font

    @pytest.mark.asyncio
    async def test_custom_fallback_family(self, make_element, context):
        node = make_element(attrs={"className": "font-['Lora:Regular',sans-serif]"})

        await FontDetectionTransform(fallback_family="serif").execute(node, context)

        assert node.style_object().get("fontFamily") == "Lora, serif"
