"""Unit tests for Sphere and MovingSphere."""

import math

import pytest

from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.sphere import MovingSphere, Sphere, get_sphere_uv


@pytest.fixture
def unit_sphere(white):
    return Sphere(Vector3(0, 0, 0), 1.0, white)


class TestSphereHit:
    """Tests for ray-sphere intersection."""

    def test_hit_from_outside(self, unit_sphere, white):
        rec = unit_sphere.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p == Vector3(0, 0, -1)
        assert rec.normal == Vector3(0, 0, -1)
        assert rec.front_face
        assert rec.material is white

    def test_hit_from_inside_is_back_face(self, unit_sphere):
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        # Normal faces the ray, against the outward direction.
        assert rec.normal == Vector3(0, 0, -1)

    def test_interval_is_open(self, unit_sphere):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert unit_sphere.hit(ray, 0.001, 4.0) is None
        rec = unit_sphere.hit(ray, 4.0, math.inf)
        assert rec.t == pytest.approx(6.0)

    def test_miss(self, unit_sphere):
        assert unit_sphere.hit(Ray(Vector3(0, 5, -5), Vector3(0, 0, 1)), 0.001, math.inf) is None

    def test_unnormalized_direction(self, unit_sphere):
        rec = unit_sphere.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 2)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)


class TestSphereUV:
    """Tests for the sphere surface parametrization."""

    @pytest.mark.parametrize("p, expected", [
        (Vector3(1.0, 0.0, 0.0), (0.5, 0.5)),
        (Vector3(0.0, 0.0, 1.0), (0.25, 0.5)),
        (Vector3(0.0, 0.0, -1.0), (0.75, 0.5)),
    ])
    def test_equator(self, p, expected):
        u, v = get_sphere_uv(p)
        assert u == pytest.approx(expected[0])
        assert v == pytest.approx(expected[1])

    def test_poles(self):
        assert get_sphere_uv(Vector3(0.0, 1.0, 0.0))[1] == pytest.approx(1.0)
        assert get_sphere_uv(Vector3(0.0, -1.0, 0.0))[1] == pytest.approx(0.0)


class TestSphereBounds:
    """Tests for bounding boxes."""

    def test_bounding_box(self, white):
        box = Sphere(Vector3(1, 2, 3), 2.0, white).bounding_box()
        assert box.minimum == Vector3(-1, 0, 1)
        assert box.maximum == Vector3(3, 4, 5)

    def test_moving_sphere_box_covers_both_ends(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 0.0, 1.0, 0.5, white)
        box = sphere.bounding_box()
        assert box.minimum == Vector3(-0.5, -0.5, -0.5)
        assert box.maximum == Vector3(0.5, 2.5, 0.5)


class TestMovingSphere:
    """Tests for motion along the shutter interval."""

    def test_center_interpolates(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 0.0, 1.0, 0.5, white)
        assert sphere.center(0.0) == Vector3(0, 0, 0)
        assert sphere.center(0.5) == Vector3(0, 1, 0)
        assert sphere.center(1.0) == Vector3(0, 2, 0)

    def test_hit_uses_ray_time(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 0.0, 1.0, 0.5, white)
        early = Ray(Vector3(0, 2, -5), Vector3(0, 0, 1), 0.0)
        late = Ray(Vector3(0, 2, -5), Vector3(0, 0, 1), 1.0)
        assert sphere.hit(early, 0.001, math.inf) is None
        assert sphere.hit(late, 0.001, math.inf).t == pytest.approx(4.5)

    def test_equal_times_do_not_divide_by_zero(self, white):
        sphere = MovingSphere(Vector3(0, 0, 0), Vector3(0, 2, 0), 1.0, 1.0, 0.5, white)
        assert sphere.center(3.0) == Vector3(0, 0, 0)


class TestSphereLightSampling:
    """Tests for sampling a sphere as a light."""

    def test_pdf_value_inside_cone(self, white):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, white)
        expected = 1.0 / (2 * math.pi * (1 - math.sqrt(1 - 1 / 25)))
        assert sphere.pdf_value(Vector3(0, 0, 0), Vector3(0, 0, 1)) == pytest.approx(expected)

    def test_pdf_value_outside_cone_is_zero(self, white):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, white)
        assert sphere.pdf_value(Vector3(0, 0, 0), Vector3(1, 0, 0)) == 0.0

    def test_origin_inside_sphere(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        for direction in (Vector3(0, 1, 0), Vector3(0, 0, -1)):
            value = sphere.pdf_value(Vector3(0, 0, 0.5), direction)
            assert value == pytest.approx(1.0 / (4 * math.pi))

    def test_random_from_center(self, white, rng):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        for _ in range(50):
            assert sphere.random(Vector3(0, 0, 0), rng).length() == pytest.approx(1.0)

    def test_random_directions_hit_the_sphere(self, white, rng):
        sphere = Sphere(Vector3(1, 2, 5), 1.0, white)
        origin = Vector3(0, 0, 0)
        for _ in range(200):
            direction = sphere.random(origin, rng)
            assert sphere.hit(Ray(origin, direction), 0.001, math.inf) is not None
