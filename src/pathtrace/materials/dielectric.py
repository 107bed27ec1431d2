# materials/dielectric.py
import math

from pathtrace.core.ray import Ray
from pathtrace.core.utils import reflect, refract, schlick
from pathtrace.core.vector import Vector3
from pathtrace.materials.material import Material, ScatterRecord


class Dielectric(Material):
    """
    Clear glass-like material with index of refraction ir. Each scatter
    either reflects or refracts, chosen by Schlick's reflectance.
    """
    def __init__(self, ir: float):
        self.ir = ir

    def scatter(self, ray_in: Ray, rec, rng) -> ScatterRecord:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        direction = None
        cannot_refract = refraction_ratio * sin_theta > 1.0
        if not cannot_refract and schlick(cos_theta, refraction_ratio) <= rng.random():
            direction = refract(unit_direction, rec.normal, refraction_ratio)
        if direction is None:
            direction = reflect(unit_direction, rec.normal)

        return ScatterRecord.specular(attenuation, Ray(rec.p, direction, ray_in.time))
