# geometry/bvh.py
import logging
from typing import Optional

from pathtrace.core.aabb import AABB
from pathtrace.errors import SceneError
from pathtrace.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def _box_of(obj: Hittable) -> AABB:
    box = obj.bounding_box()
    if box is None:
        raise SceneError(f"no bounding box for {type(obj).__name__} in BVHNode")
    return box


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Built top-down: each node picks a random axis, sorts its objects by the
    minimum corner of their boxes along it, and splits the sorted run at the
    midpoint. One object makes a leaf (right is None), two objects become the
    two children directly.
    """
    def __init__(self, objects: list, rng, _root: bool = True):
        if not objects:
            raise SceneError("cannot build a BVH over no objects")

        axis = rng.randrange(3)
        ordered = sorted(objects, key=lambda obj: _box_of(obj).minimum[axis])
        span = len(ordered)

        if span == 1:
            self.left = ordered[0]
            self.right = None
            self.box = _box_of(self.left)
        else:
            if span == 2:
                self.left, self.right = ordered
            else:
                mid = span // 2
                self.left = BVHNode(ordered[:mid], rng, _root=False)
                self.right = BVHNode(ordered[mid:], rng, _root=False)
            self.box = AABB.surrounding_box(_box_of(self.left), _box_of(self.right))

        if _root:
            logger.debug("Built BVH over %d objects (%d nodes)",
                         span, sum(1 for _ in self.iter_nodes()))

    def hit(self, ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        if self.right is None:
            return hit_left

        # Anything on the right must beat the left hit to matter.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def iter_nodes(self):
        """
        Yields this node and every BVHNode below it, depth first.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            for child in (node.left, node.right):
                if isinstance(child, BVHNode):
                    stack.append(child)
