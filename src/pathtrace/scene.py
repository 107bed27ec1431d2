# scene.py
from typing import Callable, Optional, Union

from pathtrace.camera.camera import Camera
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable


class SkyGradient:
    """
    Background that blends from horizon to zenith colour by the height of the
    escaping ray's direction.
    """
    def __init__(self, horizon: Vector3 = Vector3(1.0, 1.0, 1.0),
                 zenith: Vector3 = Vector3(0.5, 0.7, 1.0)):
        self.horizon = horizon
        self.zenith = zenith

    def __call__(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t


class Scene:
    """
    Everything the integrator needs: the root hittable, the camera, the
    emitters to sample directly and what a ray sees when it escapes.

    lights must hold the same objects that were placed in world, so light
    sampling and intersection agree.
    """
    def __init__(self, world: Hittable, camera: Camera, lights: Optional[Hittable] = None,
                 background: Union[Vector3, Callable[[Ray], Vector3]] = Vector3(0, 0, 0)):
        self.world = world
        self.camera = camera
        self.lights = lights
        self.background = background
