# materials/metal.py
from typing import Optional, Union

from pathtrace.core.ray import Ray
from pathtrace.core.utils import random_in_unit_sphere, reflect
from pathtrace.core.vector import Vector3
from pathtrace.materials.material import Material, ScatterRecord
from pathtrace.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz
        if reflected.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it does not scatter forward
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord.specular(attenuation, Ray(rec.p, reflected, ray_in.time))
