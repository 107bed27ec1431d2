# geometry/transform.py
"""
Instance wrappers that place a hittable in the world without touching its
geometry: the ray is moved into the object's frame, the query delegated,
and the hit mapped back to world space.
"""
import math
from typing import Optional

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        rec.set_face_normal(ray, rec.outward_normal())
        return rec

    def bounding_box(self) -> Optional[AABB]:
        box = self.obj.bounding_box()
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(origin - self.offset, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.obj.random(origin - self.offset, rng)


class Rotate(Hittable):
    """
    Rotation by angle degrees about the world x (0), y (1) or z (2) axis.

    The world box is the axis-aligned hull of the eight rotated corners of
    the object's box, so it is looser than the rotated shape.
    """
    def __init__(self, obj: Hittable, angle: float, axis: int = 1):
        if axis not in (0, 1, 2):
            raise ValueError(f"rotation axis must be 0, 1 or 2, got {axis!r}")
        self.obj = obj
        self.axis = axis
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        # Indices of the two coordinates mixed by the rotation, in
        # right-handed order about the rotation axis.
        self._i = (axis + 1) % 3
        self._j = (axis + 2) % 3

        box = obj.bounding_box()
        if box is None:
            self.box = None
        else:
            inf = math.inf
            lo = [inf, inf, inf]
            hi = [-inf, -inf, -inf]
            for corner in box.corners():
                tester = self._to_world(corner)
                for c in range(3):
                    lo[c] = min(lo[c], tester[c])
                    hi[c] = max(hi[c], tester[c])
            self.box = AABB(Vector3.from_axes(lo), Vector3.from_axes(hi))

    def _rotate(self, v: Vector3, sin_theta: float) -> Vector3:
        coords = [v.x, v.y, v.z]
        a = coords[self._i]
        b = coords[self._j]
        coords[self._i] = self.cos_theta * a - sin_theta * b
        coords[self._j] = sin_theta * a + self.cos_theta * b
        return Vector3.from_axes(coords)

    def _to_world(self, v: Vector3) -> Vector3:
        return self._rotate(v, self.sin_theta)

    def _to_object(self, v: Vector3) -> Vector3:
        return self._rotate(v, -self.sin_theta)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.set_face_normal(ray, self._to_world(rec.outward_normal()))
        return rec

    def bounding_box(self) -> Optional[AABB]:
        return self.box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(self._to_object(origin), self._to_object(direction))

    def random(self, origin: Vector3, rng) -> Vector3:
        return self._to_world(self.obj.random(self._to_object(origin), rng))


class RotateY(Rotate):
    def __init__(self, obj: Hittable, angle: float):
        super().__init__(obj, angle, axis=1)


class FlipFace(Hittable):
    """
    Turns the object inside out: the outward normal is reversed, so the
    front_face flag of every hit is inverted. Used to aim one-sided emitters.
    """
    def __init__(self, obj: Hittable):
        self.obj = obj

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec = self.obj.hit(ray, t_min, t_max, rng)
        if rec is not None:
            rec.front_face = not rec.front_face
        return rec

    def bounding_box(self) -> Optional[AABB]:
        return self.obj.bounding_box()

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.obj.pdf_value(origin, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.obj.random(origin, rng)
