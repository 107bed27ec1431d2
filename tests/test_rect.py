"""Unit tests for axis-aligned rects and boxes."""

import math

import pytest

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.box import Box
from pathtrace.geometry.rect import RECT_PADDING, XYRect, XZRect, YZRect


class TestRectHit:
    """Tests for ray-rect intersection."""

    def test_xy_rect_front_face(self, white):
        rect = XYRect(0, 1, 0, 1, -1, white)
        rec = rect.hit(Ray(Vector3(0.5, 0.25, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert rec.p == Vector3(0.5, 0.25, -1)
        assert rec.front_face
        assert rec.normal == Vector3(0, 0, 1)
        assert (rec.u, rec.v) == (pytest.approx(0.5), pytest.approx(0.25))

    def test_xz_rect_back_face(self, white):
        rect = XZRect(0, 2, 0, 4, 3, white)
        rec = rect.hit(Ray(Vector3(1, 0, 1), Vector3(0, 1, 0)), 0.001, math.inf)
        assert rec.t == pytest.approx(3.0)
        assert rec.p == Vector3(1, 3, 1)
        assert not rec.front_face
        assert rec.normal == Vector3(0, -1, 0)
        assert (rec.u, rec.v) == (pytest.approx(0.5), pytest.approx(0.25))

    def test_yz_rect(self, white):
        rect = YZRect(-1, 1, -1, 1, 2, white)
        rec = rect.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), 0.001, math.inf)
        assert rec.p == Vector3(2, 0, 0)
        assert rec.normal == Vector3(-1, 0, 0)

    def test_parallel_ray_misses(self, white):
        rect = XYRect(-1, 1, -1, 1, 0, white)
        assert rect.hit(Ray(Vector3(-5, 0, 0), Vector3(1, 0, 0)), 0.001, math.inf) is None

    def test_outside_extent_misses(self, white):
        rect = XYRect(0, 1, 0, 1, -1, white)
        assert rect.hit(Ray(Vector3(2, 0.5, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_interval_is_open(self, white):
        rect = XYRect(0, 1, 0, 1, -1, white)
        ray = Ray(Vector3(0.5, 0.5, 0), Vector3(0, 0, -1))
        assert rect.hit(ray, 0.001, 1.0) is None


class TestRectBounds:
    """Tests for the padded bounding box."""

    def test_box_is_padded_on_thin_axis(self, white):
        box = XZRect(0, 2, 0, 4, 3, white).bounding_box()
        assert box.minimum == Vector3(0, 3 - RECT_PADDING, 0)
        assert box.maximum == Vector3(2, 3 + RECT_PADDING, 4)


class TestRectLightSampling:
    """Tests for sampling a rect as a light."""

    def test_pdf_value(self, lamp):
        rect = XZRect(-1, 1, -1, 1, 2, lamp)
        # dist^2 / (cos * area) = 4 / (1 * 4)
        assert rect.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)) == pytest.approx(1.0)

    def test_pdf_value_for_miss_is_zero(self, lamp):
        rect = XZRect(-1, 1, -1, 1, 2, lamp)
        assert rect.pdf_value(Vector3(0, 0, 0), Vector3(0, -1, 0)) == 0.0

    def test_random_points_lie_on_rect(self, lamp, rng):
        rect = XZRect(-1, 1, -1, 1, 2, lamp)
        origin = Vector3(0.5, 0, 0)
        for _ in range(100):
            target = origin + rect.random(origin, rng)
            assert target.y == pytest.approx(2.0)
            assert -1 <= target.x <= 1
            assert -1 <= target.z <= 1


class TestBox:
    """Tests for the six-sided box."""

    @pytest.fixture
    def box(self, white):
        return Box(Vector3(0, 0, 0), Vector3(1, 1, 1), white)

    def test_bounding_box(self, box):
        assert box.bounding_box() == AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))

    def test_hit_from_outside_is_front_face(self, box):
        rec = box.hit(Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(4.0)
        assert rec.front_face
        assert rec.normal == Vector3(0, 0, 1)

    @pytest.mark.parametrize("origin, direction", [
        (Vector3(0.5, 0.5, -5), Vector3(0, 0, 1)),
        (Vector3(0.5, -5, 0.5), Vector3(0, 1, 0)),
        (Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0)),
    ])
    def test_min_faces_point_outward(self, box, origin, direction):
        rec = box.hit(Ray(origin, direction), 0.001, math.inf)
        assert rec.front_face
        assert rec.outward_normal() == -direction

    def test_hit_from_inside_is_back_face(self, box):
        rec = box.hit(Ray(Vector3(0.5, 0.5, 0.5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert not rec.front_face
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.outward_normal() == Vector3(0, 0, -1)
