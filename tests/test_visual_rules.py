"""
Tests for gradient, geometry and blend-mode helpers.
"""

import pytest

from design_codegen.visual_rules import (
    GradientStop,
    build_linear_gradient,
    build_radial_gradient,
    format_points,
    is_supported_blend_mode,
    parse_angle,
    parse_gradient_stops,
    regular_polygon_points,
    star_points,
)


class TestGradientStops:
    """Tests for parse_gradient_stops."""

    def test_commas_inside_color_functions(self):
        stops = parse_gradient_stops("rgba(0,0,0,.5) 0%, #fff 100%")

        assert stops == [GradientStop("rgba(0,0,0,.5)", 0), GradientStop("#fff", 100)]

    def test_semicolon_separated(self):
        stops = parse_gradient_stops("red 0%; blue 100%")

        assert [s.color for s in stops] == ["red", "blue"]

    def test_missing_positions_spread_evenly(self):
        stops = parse_gradient_stops("red, green, blue")

        assert [s.position for s in stops] == [0, 50, 100]

    @pytest.mark.parametrize("raw", [None, "", "   ", "#fff 0%"])
    def test_unusable_data(self, raw):
        assert parse_gradient_stops(raw) is None


class TestGradientBuilders:
    """Tests for gradient string builders."""

    def test_linear(self):
        stops = [GradientStop("red", 0), GradientStop("blue", 100)]

        assert build_linear_gradient(stops, 45) == "linear-gradient(45deg, red 0%, blue 100%)"

    def test_fractional_positions(self):
        stops = [GradientStop("red", 0), GradientStop("blue", 100 / 3)]

        assert build_radial_gradient(stops) == "radial-gradient(circle, red 0%, blue 33.33%)"

    @pytest.mark.parametrize("raw,expected", [
        ("45", 45.0),
        ("45deg", 45.0),
        ("-30deg", -30.0),
        ("to right", 90),
        (None, 90),
    ])
    def test_parse_angle(self, raw, expected):
        assert parse_angle(raw) == expected


class TestGeometry:
    """Tests for polygon and star vertices."""

    def test_polygon_first_vertex_points_up(self):
        points = regular_polygon_points(0, 0, 10, 4)

        assert len(points) == 4
        assert points[0][0] == pytest.approx(0)
        assert points[0][1] == pytest.approx(-10)

    def test_polygon_needs_three_sides(self):
        with pytest.raises(ValueError):
            regular_polygon_points(0, 0, 10, 2)

    def test_star_alternates_radii(self):
        points = star_points(0, 0, 10, 4, points=5)

        assert len(points) == 10
        assert points[0][1] == pytest.approx(-10)
        assert (points[1][0] ** 2 + points[1][1] ** 2) ** 0.5 == pytest.approx(4)

    def test_star_inner_radius_must_be_smaller(self):
        with pytest.raises(ValueError):
            star_points(0, 0, 4, 10)

    def test_format_points(self):
        assert format_points([(1.0, 2.5), (3.333, 0)]) == "1,2.5 3.33,0"


class TestBlendModes:
    """Tests for the blend-mode table."""

    @pytest.mark.parametrize("mode", ["multiply", "Screen", " color-dodge "])
    def test_supported(self, mode):
        assert is_supported_blend_mode(mode) is True

    @pytest.mark.parametrize("mode", ["", None, "sparkle", "colour"])
    def test_unsupported(self, mode):
        assert is_supported_blend_mode(mode) is False
