# scenes.py
"""
Demo scenes. Each builder takes the image aspect ratio and a random source
(used for BVH construction and any random placement) and returns a Scene.
"""
import random
from typing import Callable, Dict

from pathtrace.camera.camera import Camera
from pathtrace.core.vector import Vector3
from pathtrace.geometry.box import Box
from pathtrace.geometry.hittable import Hittable
from pathtrace.geometry.rect import XYRect, XZRect, YZRect
from pathtrace.geometry.sphere import MovingSphere, Sphere
from pathtrace.geometry.transform import FlipFace, RotateY, Translate
from pathtrace.geometry.volume import ConstantMedium
from pathtrace.geometry.world import HittableList
from pathtrace.materials.dielectric import Dielectric
from pathtrace.materials.diffuse_light import DiffuseLight
from pathtrace.materials.lambertian import Lambertian
from pathtrace.materials.metal import Metal
from pathtrace.materials.perlin import Perlin
from pathtrace.materials.textures import CheckerTexture, NoiseTexture
from pathtrace.scene import Scene, SkyGradient

BLACK = Vector3(0, 0, 0)


def _cornell_walls(world: HittableList, light: Hittable):
    red = Lambertian(Vector3(0.65, 0.05, 0.05))
    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    green = Lambertian(Vector3(0.12, 0.45, 0.15))

    world.add(FlipFace(YZRect(0, 555, 0, 555, 555, green)))
    world.add(YZRect(0, 555, 0, 555, 0, red))
    world.add(light)
    world.add(FlipFace(XZRect(0, 555, 0, 555, 555, white)))
    world.add(XZRect(0, 555, 0, 555, 0, white))
    world.add(FlipFace(XYRect(0, 555, 0, 555, 555, white)))
    return white


def _cornell_camera(aspect_ratio: float) -> Camera:
    return Camera(
        lookfrom=Vector3(278, 278, -800),
        lookat=Vector3(278, 278, 0),
        vup=Vector3(0, 1, 0),
        vfov=40.0,
        aspect_ratio=aspect_ratio,
        aperture=0.0,
        focus_dist=10.0,
    )


def _cornell_blocks(white) -> tuple:
    tall = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    return tall, short


def cornell_box(aspect_ratio: float = 1.0, rng=None) -> Scene:
    rng = rng or random.Random(0)
    world = HittableList()
    # The ceiling light faces down into the box
    light = FlipFace(XZRect(213, 343, 227, 332, 554, DiffuseLight(Vector3(15, 15, 15))))
    white = _cornell_walls(world, light)
    for block in _cornell_blocks(white):
        world.add(block)

    return Scene(world.build_bvh(rng), _cornell_camera(aspect_ratio),
                 lights=HittableList([light]), background=BLACK)


def cornell_smoke(aspect_ratio: float = 1.0, rng=None) -> Scene:
    rng = rng or random.Random(0)
    world = HittableList()
    light = FlipFace(XZRect(113, 443, 127, 432, 554, DiffuseLight(Vector3(7, 7, 7))))
    white = _cornell_walls(world, light)
    tall, short = _cornell_blocks(white)
    world.add(ConstantMedium(tall, 0.01, Vector3(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Vector3(1, 1, 1)))

    return Scene(world.build_bvh(rng), _cornell_camera(aspect_ratio),
                 lights=HittableList([light]), background=BLACK)


def simple_light(aspect_ratio: float = 16.0 / 9.0, rng=None) -> Scene:
    rng = rng or random.Random(0)
    marble = NoiseTexture(Perlin(rng), 4.0)
    lamp = DiffuseLight(Vector3(4, 4, 4))

    sphere_light = Sphere(Vector3(0, 7, 0), 2, lamp)
    rect_light = XYRect(3, 5, 1, 3, -2, lamp)
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)),
        sphere_light,
        rect_light,
    ])

    camera = Camera(
        lookfrom=Vector3(26, 3, 6),
        lookat=Vector3(0, 2, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        focus_dist=10.0,
    )
    return Scene(world.build_bvh(rng), camera,
                 lights=HittableList([sphere_light, rect_light]), background=BLACK)


def two_perlin_spheres(aspect_ratio: float = 16.0 / 9.0, rng=None) -> Scene:
    rng = rng or random.Random(0)
    marble = Lambertian(NoiseTexture(Perlin(rng), 4.0))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])
    camera = Camera(
        lookfrom=Vector3(13, 2, 3),
        lookat=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        focus_dist=10.0,
    )
    return Scene(world.build_bvh(rng), camera, background=SkyGradient())


def random_spheres(aspect_ratio: float = 16.0 / 9.0, rng=None, grid: int = 5) -> Scene:
    """
    A checkered ground under a (2 * grid)^2 field of small random spheres,
    the diffuse ones bouncing during the shutter interval, plus three large
    feature spheres.
    """
    rng = rng or random.Random(0)
    world = HittableList()
    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    def random_color(lo=0.0, hi=1.0):
        return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_color() * random_color()
                center1 = center + Vector3(0, 0.5 * rng.random(), 0)
                world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                world.add(Sphere(center, 0.2, Metal(random_color(0.5, 1.0), 0.5 * rng.random())))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = Camera(
        lookfrom=Vector3(13, 2, 3),
        lookat=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
        time0=0.0,
        time1=1.0,
    )
    return Scene(world.build_bvh(rng), camera, background=SkyGradient())


SCENES: Dict[str, Callable[..., Scene]] = {
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "simple_light": simple_light,
    "two_perlin_spheres": two_perlin_spheres,
    "random_spheres": random_spheres,
}


def build_scene(name: str, aspect_ratio: float, rng) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    return builder(aspect_ratio=aspect_ratio, rng=rng)
