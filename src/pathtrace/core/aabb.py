# core/aabb.py
from pathtrace.core.vector import Vector3


class AABB:
    """
    Axis-aligned bounding box given by its component-wise minimum and maximum
    corners. Zero-thickness boxes are allowed.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, intersect the ray's interval with the slab.
        for a in range(3):
            origin = ray.origin[a]
            direction = ray.direction[a]
            lo = self.minimum[a]
            hi = self.maximum[a]
            if direction == 0.0:
                # Parallel to the slab: inside it for every t, or never.
                if origin < lo or origin > hi:
                    return False
                continue
            inv_d = 1.0 / direction
            t0 = (lo - origin) * inv_d
            t1 = (hi - origin) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, point: Vector3, eps: float = 0.0) -> bool:
        return all(
            self.minimum[a] - eps <= point[a] <= self.maximum[a] + eps
            for a in range(3)
        )

    def corners(self):
        """
        Yields the eight corners of the box.
        """
        for i in (0, 1):
            for j in (0, 1):
                for k in (0, 1):
                    yield Vector3(
                        self.maximum.x if i else self.minimum.x,
                        self.maximum.y if j else self.minimum.y,
                        self.maximum.z if k else self.minimum.z,
                    )

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
