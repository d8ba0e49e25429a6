"""Unit tests for light sources."""

import math

import pytest

from src.raytracer.core.vector import Vec3
from src.raytracer.materials.color import Color
from src.raytracer.scene.lights import DirectionalLight, LightPoint, SpotLight


def point_at_angle(degrees, distance=10.0):
    """Return a point seen from the origin at an angle from +Z."""
    radians = math.radians(degrees)
    return Vec3(distance * math.sin(radians), 0.0, distance * math.cos(radians))


class TestLightPoint:
    """Tests for the omnidirectional light."""

    def test_constant_color(self):
        light = LightPoint(Vec3(1.0, 2.0, 3.0), Color(0.8, 0.0, 0.0))
        assert light.source() == Vec3(1.0, 2.0, 3.0)
        assert light.light_color_at(Vec3(100.0, 0.0, 0.0)) == Color(0.8, 0.0, 0.0)

    def test_default_color_is_white(self):
        assert LightPoint(Vec3()).color == Color.WHITE


class TestSpotLight:
    """Tests for the cone light falloff."""

    @pytest.fixture
    def spot(self):
        return SpotLight(Vec3(), Vec3(0.0, 0.0, 2.0), 10.0, 20.0, Color.WHITE)

    def test_angles_stored_in_radians(self, spot):
        assert spot.inner_angle == pytest.approx(math.radians(10.0))
        assert spot.outer_angle == pytest.approx(math.radians(20.0))
        assert spot.direction == Vec3(0.0, 0.0, 1.0)

    def test_full_color_inside_inner_cone(self, spot):
        assert spot.light_color_at(point_at_angle(0.0)) == Color.WHITE
        assert spot.light_color_at(point_at_angle(5.0)) == Color.WHITE

    def test_linear_falloff(self, spot):
        """Test that halfway between the cones the light is half as bright."""
        color = spot.light_color_at(point_at_angle(15.0))
        assert color.to_tuple() == pytest.approx((0.5, 0.5, 0.5))

    def test_dark_outside_outer_cone(self, spot):
        assert spot.light_color_at(point_at_angle(30.0)) == Color.BLACK
        assert spot.light_color_at(Vec3(0.0, 0.0, -10.0)) == Color.BLACK

    def test_rejects_inverted_angles(self):
        with pytest.raises(ValueError, match="inner"):
            SpotLight(Vec3(), Vec3(0.0, 0.0, 1.0), 30.0, 10.0)


class TestDirectionalLight:
    """Tests for the distant light."""

    def test_source_is_far_against_direction(self):
        light = DirectionalLight(Vec3(0.0, -2.0, 0.0), Color.WHITE, distance=1000.0)
        assert light.direction == Vec3(0.0, -1.0, 0.0)
        assert light.source() == Vec3(0.0, 1000.0, 0.0)

    def test_constant_color(self):
        light = DirectionalLight(Vec3(1.0, -1.0, 0.0), Color.RED)
        assert light.light_color_at(Vec3(3.0, 4.0, 5.0)) == Color.RED
