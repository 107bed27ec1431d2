# geometry/sphere.py
import math
from typing import Optional, Tuple

from pathtrace.core.aabb import AABB
from pathtrace.core.onb import ONB
from pathtrace.core.ray import Ray
from pathtrace.core.utils import random_to_sphere, random_unit_vector
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable, HitRecord


def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Surface coordinates of a point p on the unit sphere: u follows the angle
    around the y axis from -x, v runs from y=-1 to y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def hit_sphere(center: Vector3, radius: float, material, ray: Ray,
               t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0 or a == 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    rec.material = material
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    Spheres can be sampled as lights over the cone they subtend.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        distance_squared = (self.center - origin).length_squared()
        if distance_squared <= self.radius * self.radius:
            # From inside, every direction reaches the surface
            return 1.0 / (4 * math.pi)
        if self.hit(Ray(origin, direction), 0.001, math.inf) is None:
            return 0.0
        cos_theta_max = math.sqrt(1.0 - self.radius * self.radius / distance_squared)
        solid_angle = 2 * math.pi * (1.0 - cos_theta_max)
        return 1.0 / solid_angle

    def random(self, origin: Vector3, rng) -> Vector3:
        direction = self.center - origin
        distance_squared = direction.length_squared()
        if distance_squared <= self.radius * self.radius:
            return random_unit_vector(rng)
        uvw = ONB(direction)
        return uvw.local(random_to_sphere(self.radius, distance_squared, rng))


class MovingSphere(Hittable):
    """
    Sphere whose center moves linearly from center0 at time0 to center1 at
    time1. Rays pick the center by their own time stamp.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        box0 = AABB(self.center0 - offset, self.center0 + offset)
        box1 = AABB(self.center1 - offset, self.center1 + offset)
        return AABB.surrounding_box(box0, box1)
