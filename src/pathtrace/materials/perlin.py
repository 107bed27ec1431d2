# materials/perlin.py
"""
Gradient (Perlin) noise over 3D space.

The lattice gradients and permutation tables are drawn once from the rng
given at construction, so a noise field is reproducible and can be shared by
any number of textures.
"""
import math
from typing import List

from pathtrace.core.utils import random_unit_vector
from pathtrace.core.vector import Vector3


class Perlin:
    def __init__(self, rng, point_count: int = 256):
        if point_count <= 0 or point_count & (point_count - 1):
            raise ValueError(f"point_count must be a power of two, got {point_count}")
        self.point_count = point_count
        self.ranvec = [random_unit_vector(rng) for _ in range(point_count)]
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    def _generate_perm(self, rng) -> List[int]:
        p = list(range(self.point_count))
        rng.shuffle(p)
        return p

    def noise(self, p: Vector3) -> float:
        """
        Smoothly varying value in roughly [-1, 1], zero at lattice points.
        """
        fx = math.floor(p.x)
        fy = math.floor(p.y)
        fz = math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i = int(fx)
        j = int(fy)
        k = int(fz)
        mask = self.point_count - 1

        # Hermite cubic smoothing of the interpolation weights
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    gradient = self.ranvec[
                        self.perm_x[(i + di) & mask]
                        ^ self.perm_y[(j + dj) & mask]
                        ^ self.perm_z[(k + dk) & mask]
                    ]
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * gradient.dot(weight))
        return accum

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """
        Absolute sum of depth noise octaves, halving the weight and doubling
        the frequency each octave.
        """
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
