# geometry/hittable.py
from typing import Optional

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "u", "v")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always facing the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outward side
        self.material = material
        self.u = u              # Surface coordinates
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def outward_normal(self) -> Vector3:
        return self.normal if self.front_face else -self.normal


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Light-capable primitives also override pdf_value() and random() so they
    can be importance sampled by the integrator.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> Optional[AABB]:
        """
        Box enclosing every point the object can be hit at, or None for
        objects without finite bounds.
        """
        return None

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return 0.0

    def random(self, origin: Vector3, rng) -> Vector3:
        return Vector3(1, 0, 0)
