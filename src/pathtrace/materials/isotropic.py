# materials/isotropic.py
from typing import Union

from pathtrace.core.ray import Ray
from pathtrace.core.utils import random_in_unit_sphere
from pathtrace.core.vector import Vector3
from pathtrace.materials.material import Material, ScatterRecord
from pathtrace.materials.textures import Texture, as_texture


class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in every
    direction.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> ScatterRecord:
        scattered = Ray(rec.p, random_in_unit_sphere(rng), ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord.specular(attenuation, scattered)
