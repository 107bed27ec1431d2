# geometry/rect.py
import math
from typing import Optional

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable, HitRecord

# Half thickness of the box around a flat rect.
RECT_PADDING = 1e-4


class AxisAlignedRect(Hittable):
    """
    Rectangle [a0, a1] x [b0, b1] lying in the plane axis_k = k.

    Subclasses fix which world axes play the roles of a, b and k. The
    outward normal is the +k axis; wrap in FlipFace to face the other way.
    """
    A_AXIS = 0
    B_AXIS = 1
    K_AXIS = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.A_AXIS] = a
        coords[self.B_AXIS] = b
        coords[self.K_AXIS] = k
        return Vector3.from_axes(coords)

    def outward_normal(self) -> Vector3:
        return self._point(0.0, 0.0, 1.0)

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        dk = ray.direction[self.K_AXIS]
        if dk == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.K_AXIS]) / dk
        if t <= t_min or t >= t_max:
            return None

        a = ray.origin[self.A_AXIS] + t * ray.direction[self.A_AXIS]
        b = ray.origin[self.B_AXIS] + t * ray.direction[self.B_AXIS]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.set_face_normal(ray, self.outward_normal())
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return AABB(
            self._point(self.a0, self.b0, self.k - RECT_PADDING),
            self._point(self.a1, self.b1, self.k + RECT_PADDING),
        )

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, math.inf)
        if rec is None:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(rec.normal)) / direction.length()
        if cosine == 0.0:
            return 0.0
        return distance_squared / (cosine * self.area())

    def random(self, origin: Vector3, rng) -> Vector3:
        random_point = self._point(
            rng.uniform(self.a0, self.a1),
            rng.uniform(self.b0, self.b1),
            self.k,
        )
        return random_point - origin


class XYRect(AxisAlignedRect):
    A_AXIS = 0
    B_AXIS = 1
    K_AXIS = 2


class XZRect(AxisAlignedRect):
    A_AXIS = 0
    B_AXIS = 2
    K_AXIS = 1


class YZRect(AxisAlignedRect):
    A_AXIS = 1
    B_AXIS = 2
    K_AXIS = 0
