# materials/diffuse_light.py
from typing import Union

from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.materials.material import Material
from pathtrace.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    Light leaves the front face only, so a rect light can be aimed with
    FlipFace.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def emitted(self, ray_in: Ray, rec, u: float, v: float, p: Vector3) -> Vector3:
        """
        Return the emitted radiance at (u, v, p).

        Args:
            ray_in (Ray): The ray that reached the emitter.
            rec (HitRecord): The hit on the emitter.
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture, black on the back face.
        """
        if not rec.front_face:
            return Vector3(0, 0, 0)
        return self.texture.value(u, v, p)
