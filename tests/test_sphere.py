"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray pointing away from sphere
- Ray starting inside sphere (far side)
- Ray tangent to sphere
- Normals and texture coordinates
"""

import pytest

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vec3
from src.raytracer.geometry.sphere import Sphere

FORWARD = Vec3(0.0, 0.0, 1.0)


class TestSphereBasics:
    """Tests for Sphere construction."""

    def test_defaults(self):
        sphere = Sphere()
        assert sphere.center == Vec3(0.0, 0.0, 0.0)
        assert sphere.radius == 1.0

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_rejects_non_positive_radius(self, radius):
        with pytest.raises(ValueError, match="radius"):
            Sphere(Vec3(), radius)


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit_from_outside(self):
        """Test that a ray from (0, 0, -2) hits the near side at z = -1."""
        point = Sphere().intersect(Ray(Vec3(0.0, 0.0, -2.0), FORWARD))
        assert point is not None
        assert point.z == pytest.approx(-1.0)
        assert point.x == pytest.approx(0.0)

    def test_miss(self):
        """Test that a ray passing beside the sphere misses."""
        assert Sphere().intersect(Ray(Vec3(2.0, 0.0, -2.0), FORWARD)) is None

    def test_sphere_behind_ray(self):
        """Test that a sphere behind the ray source is not hit."""
        assert Sphere().intersect(Ray(Vec3(0.0, 0.0, -2.0), -FORWARD)) is None

    def test_ray_from_inside_hits_far_side(self):
        """Test that a ray starting inside exits through the far side."""
        point = Sphere(Vec3(), 2.0).intersect(Ray(Vec3(0.0, 0.0, 0.0), FORWARD))
        assert point is not None
        assert point.z == pytest.approx(2.0)

    def test_tangent_ray(self):
        """Test that a grazing ray touches the sphere at one point."""
        point = Sphere().intersect(Ray(Vec3(1.0, 0.0, -2.0), FORWARD))
        assert point is not None
        assert point.x == pytest.approx(1.0)
        assert point.z == pytest.approx(0.0, abs=1e-9)

    def test_offset_sphere(self):
        sphere = Sphere(Vec3(5.0, 5.0, 5.0), 1.0)
        point = sphere.intersect(Ray.from_to(Vec3(0.0, 0.0, 0.0), Vec3(5.0, 5.0, 5.0)))
        assert point is not None
        assert point.distance(Vec3(5.0, 5.0, 5.0)) == pytest.approx(1.0)


class TestSphereSurface:
    """Tests for normals and texture coordinates."""

    def test_normal_points_outward(self):
        normal = Sphere(Vec3(1.0, 0.0, 0.0), 2.0).normal_at(Vec3(1.0, 0.0, -2.0))
        assert normal == Vec3(0.0, 0.0, -1.0)

    def test_uv_equator(self):
        """Test that the +X equator point maps to the texture center."""
        u, v = Sphere().uv_at(Vec3(1.0, 0.0, 0.0))
        assert u == pytest.approx(0.5)
        assert v == pytest.approx(0.5)

    def test_uv_poles(self):
        """Test that the poles map to the top and bottom texture edges."""
        _, v_top = Sphere().uv_at(Vec3(0.0, 1.0, 0.0))
        _, v_bottom = Sphere().uv_at(Vec3(0.0, -1.0, 0.0))
        assert v_top == pytest.approx(0.0)
        assert v_bottom == pytest.approx(1.0)

    def test_uv_in_unit_square(self):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 3.0)
        for point in [Vec3(-3.0, 0.0, 0.0), Vec3(0.0, 0.0, -3.0), Vec3(1.0, 2.0, 2.0)]:
            u, v = sphere.uv_at(point)
            assert 0.0 <= u <= 1.0
            assert 0.0 <= v <= 1.0
