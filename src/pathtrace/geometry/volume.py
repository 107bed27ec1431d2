# geometry/volume.py
import logging
import math
import random
from typing import Optional, Union

from pathtrace.core.aabb import AABB
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable, HitRecord
from pathtrace.materials.isotropic import Isotropic
from pathtrace.materials.textures import Texture

logger = logging.getLogger(__name__)

# Gap between the entry hit and the search for the exit hit.
EXIT_EPSILON = 1e-4


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium filling a closed boundary (smoke, fog).

    A ray crossing the boundary scatters somewhere inside with probability
    governed by the density; the reported hit is that scattering event, with
    an isotropic phase function as its material.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise ValueError(f"medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)
        self._logged_global_rng = False

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            if not self._logged_global_rng:
                logger.debug("ConstantMedium hit without an rng; using the global random module")
                self._logged_global_rng = True
            rng = random
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_EPSILON, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self) -> Optional[AABB]:
        return self.boundary.bounding_box()
