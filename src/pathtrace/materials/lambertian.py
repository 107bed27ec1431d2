# materials/lambertian.py
import math
from typing import Union

from pathtrace.core.pdf import CosinePDF
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.materials.material import Material, ScatterRecord
from pathtrace.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> ScatterRecord:
        """
        Diffuse scatter: the direction is left to the integrator, which samples
        a cosine-weighted hemisphere around the normal (possibly mixed with
        light sampling).
        """
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord.diffuse(attenuation, CosinePDF(rec.normal))

    def scattering_pdf(self, ray_in: Ray, rec, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.normalize())
        return cosine / math.pi if cosine > 0 else 0.0
