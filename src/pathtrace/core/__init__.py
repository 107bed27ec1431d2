from pathtrace.core.aabb import AABB
from pathtrace.core.onb import ONB
from pathtrace.core.pdf import PDF, CosinePDF, HittablePDF, MixturePDF
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Color, Vector3

__all__ = [
    "AABB", "ONB", "PDF", "CosinePDF", "HittablePDF", "MixturePDF",
    "Ray", "Color", "Vector3",
]
