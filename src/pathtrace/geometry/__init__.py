from pathtrace.geometry.box import Box
from pathtrace.geometry.bvh import BVHNode
from pathtrace.geometry.hittable import Hittable, HitRecord
from pathtrace.geometry.rect import XYRect, XZRect, YZRect
from pathtrace.geometry.sphere import MovingSphere, Sphere
from pathtrace.geometry.transform import FlipFace, Rotate, RotateY, Translate
from pathtrace.geometry.volume import ConstantMedium
from pathtrace.geometry.world import HittableList

__all__ = [
    "Box", "BVHNode", "Hittable", "HitRecord", "XYRect", "XZRect", "YZRect",
    "MovingSphere", "Sphere", "FlipFace", "Rotate", "RotateY", "Translate",
    "ConstantMedium", "HittableList",
]
