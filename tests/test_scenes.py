"""Tests for the demo scenes."""

import random

import numpy as np
import pytest

from pathtrace.camera.camera import Camera
from pathtrace.geometry.bvh import BVHNode
from pathtrace.geometry.volume import ConstantMedium
from pathtrace.renderer.raytracer import Renderer
from pathtrace.scene import Scene, SkyGradient
from pathtrace.scenes import (
    SCENES, build_scene, cornell_box, cornell_smoke, random_spheres, simple_light,
)


def leaves(root):
    found = []
    for node in root.iter_nodes():
        for child in (node.left, node.right):
            if child is not None and not isinstance(child, BVHNode):
                found.append(child)
    return found


class TestRegistry:
    """Tests for looking scenes up by name."""

    def test_all_scenes_registered(self):
        assert set(SCENES) == {
            "cornell_box", "cornell_smoke", "simple_light", "two_perlin_spheres", "random_spheres",
        }

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_every_scene_builds(self, name):
        scene = build_scene(name, 1.0, random.Random(0))
        assert isinstance(scene, Scene)
        assert isinstance(scene.camera, Camera)
        assert isinstance(scene.world, BVHNode)

    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            build_scene("teapot", 1.0, random.Random(0))


class TestSceneContents:
    """Tests for what the builders place in the world."""

    def test_cornell_lights_are_world_objects(self):
        scene = cornell_box(rng=random.Random(0))
        world_objects = leaves(scene.world)
        assert len(scene.lights) == 1
        for light in scene.lights:
            assert any(obj is light for obj in world_objects)

    def test_simple_light_has_two_lights(self):
        scene = simple_light(rng=random.Random(0))
        world_objects = leaves(scene.world)
        assert len(scene.lights) == 2
        for light in scene.lights:
            assert any(obj is light for obj in world_objects)

    def test_cornell_smoke_has_media(self):
        scene = cornell_smoke(rng=random.Random(0))
        media = [obj for obj in leaves(scene.world) if isinstance(obj, ConstantMedium)]
        assert len(media) == 2

    def test_random_spheres_is_seeded(self):
        a = random_spheres(rng=random.Random(4), grid=2)
        b = random_spheres(rng=random.Random(4), grid=2)
        centers_a = sorted((o.bounding_box().minimum.x, o.bounding_box().minimum.z) for o in leaves(a.world))
        centers_b = sorted((o.bounding_box().minimum.x, o.bounding_box().minimum.z) for o in leaves(b.world))
        assert centers_a == centers_b
        assert len(centers_a) > 4
        assert isinstance(a.background, SkyGradient)


class TestRenderScene:
    """A tiny end-to-end render of a demo scene."""

    def test_cornell_box_renders(self):
        scene = cornell_box(rng=random.Random(0))
        pixels = Renderer(4, 4, samples_per_pixel=2, max_depth=3, workers=1).render(scene)
        assert pixels.shape == (4, 4, 3)
        assert pixels.dtype == np.uint8
