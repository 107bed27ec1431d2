# materials/material.py
from typing import Optional

from pathtrace.core.pdf import PDF
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3


class ScatterRecord:
    """
    Result of a scatter event: an attenuation plus either a fixed specular
    ray to follow or a PDF to sample a diffuse direction from.
    """
    __slots__ = ("attenuation", "specular_ray", "pdf")

    def __init__(self, attenuation: Vector3, specular_ray: Optional[Ray] = None,
                 pdf: Optional[PDF] = None):
        if (specular_ray is None) == (pdf is None):
            raise ValueError("ScatterRecord needs exactly one of specular_ray or pdf")
        self.attenuation = attenuation
        self.specular_ray = specular_ray
        self.pdf = pdf

    @classmethod
    def specular(cls, attenuation: Vector3, ray: Ray) -> "ScatterRecord":
        return cls(attenuation, specular_ray=ray)

    @classmethod
    def diffuse(cls, attenuation: Vector3, pdf: PDF) -> "ScatterRecord":
        return cls(attenuation, pdf=pdf)

    @property
    def is_specular(self) -> bool:
        return self.specular_ray is not None


class Material:
    """
    Abstract material class. Subclasses override scatter() and, for diffuse
    materials, scattering_pdf(); emitters override emitted().
    """
    def scatter(self, ray_in: Ray, rec, rng) -> Optional[ScatterRecord]:
        """
        Returns how the incoming ray continues, or None if it is absorbed.
        """
        return None

    def scattering_pdf(self, ray_in: Ray, rec, scattered: Ray) -> float:
        return 0.0

    def emitted(self, ray_in: Ray, rec, u: float, v: float, p: Vector3) -> Vector3:
        return Vector3(0, 0, 0)
