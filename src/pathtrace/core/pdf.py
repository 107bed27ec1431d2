# core/pdf.py
"""
Direction densities used for importance sampling.

Every PDF can draw a direction (``generate``) and report the solid-angle
density of an arbitrary direction (``value``). The integrator mixes a
cosine-weighted surface PDF with a PDF aimed at the scene's lights.
"""
import math

from pathtrace.core.onb import ONB
from pathtrace.core.utils import random_cosine_direction
from pathtrace.core.vector import Vector3


class PDF:
    """
    Abstract direction density.
    """
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by subclasses.")

    def generate(self, rng) -> Vector3:
        raise NotImplementedError("generate() must be implemented by subclasses.")


class CosinePDF(PDF):
    """
    Cosine-weighted hemisphere around a surface normal.
    """
    def __init__(self, w: Vector3):
        self.uvw = ONB(w)

    def value(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        return cosine / math.pi if cosine > 0 else 0.0

    def generate(self, rng) -> Vector3:
        return self.uvw.local(random_cosine_direction(rng))


class HittablePDF(PDF):
    """
    Samples directions from origin toward a light-capable hittable.
    """
    def __init__(self, hittable, origin: Vector3):
        self.hittable = hittable
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.hittable.pdf_value(self.origin, direction)

    def generate(self, rng) -> Vector3:
        return self.hittable.random(self.origin, rng)


class MixturePDF(PDF):
    """
    Equal-weight mixture of two PDFs; a fair coin picks which one samples.
    """
    def __init__(self, p0: PDF, p1: PDF):
        self.p0 = p0
        self.p1 = p1

    def value(self, direction: Vector3) -> float:
        return 0.5 * self.p0.value(direction) + 0.5 * self.p1.value(direction)

    def generate(self, rng) -> Vector3:
        if rng.random() < 0.5:
            return self.p0.generate(rng)
        return self.p1.generate(rng)
