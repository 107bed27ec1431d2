# geometry/box.py
from typing import Optional

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable, HitRecord
from pathtrace.geometry.rect import XYRect, XZRect, YZRect
from pathtrace.geometry.transform import FlipFace
from pathtrace.geometry.world import HittableList


class Box(Hittable):
    """
    Axis-aligned box between corners p0 and p1 made of six rects, each facing
    outward.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = p0
        self.box_max = p1
        self.sides = HittableList([
            XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
            FlipFace(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material)),
            XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
            FlipFace(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material)),
            YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
            FlipFace(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material)),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self) -> AABB:
        return AABB(self.box_min, self.box_max)
