# geometry/world.py
from typing import List, Optional

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.errors import SceneError
from pathtrace.geometry.bvh import BVHNode
from pathtrace.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects, searched linearly. Scenes usually wrap the
    list in a BVH via build_bvh(); a list of lights is also a HittableList
    holding the very same objects that were added to the world.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable) -> Hittable:
        self.objects.append(obj)
        return obj

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, rng) -> BVHNode:
        return BVHNode(self.objects, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise SceneError("bounding box of an empty hittable list")
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box()
            if obj_box is None:
                raise SceneError(f"{type(obj).__name__} has no bounding box")
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vector3, rng) -> Vector3:
        if not self.objects:
            return Vector3(1, 0, 0)
        return self.objects[rng.randrange(len(self.objects))].random(origin, rng)
