# renderer/raytracer.py
import functools
import logging
import random
import time
from concurrent import futures
from typing import Optional

import numpy as np

from pathtrace.renderer.integrator import MAX_DEPTH, radiance
from pathtrace.renderer.tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 100
DEFAULT_SEED = 42

# Render presets; explicit settings override them.
QUALITY_LEVELS = {
    "preview": {"samples": 10, "max_depth": 8, "width": 200},
    "balanced": {"samples": 100, "max_depth": 50, "width": 400},
    "final": {"samples": 1000, "max_depth": 50, "width": 600},
}


def row_rng(seed: int, row: int) -> random.Random:
    """
    Independent random stream for one image row. Derived only from the
    render seed and the row index so the image does not depend on the
    number of workers or the order rows complete in.
    """
    state = np.random.SeedSequence(seed, spawn_key=(row,)).generate_state(2)
    return random.Random(int(state[0]) << 32 | int(state[1]))


def render_row(scene, row: int, width: int, height: int, samples_per_pixel: int,
               max_depth: int, seed: int):
    """
    Renders image row `row` (0 at the bottom) and returns it with its index
    as a (width, 3) array of summed, unaveraged radiance.
    """
    rng = row_rng(seed, row)
    camera = scene.camera
    world = scene.world
    lights = scene.lights
    background = scene.background
    # A one-pixel dimension maps every sample to the middle of the viewport
    s_den = width - 1 if width > 1 else None
    t_den = height - 1 if height > 1 else None

    line = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(samples_per_pixel):
            s = (i + rng.random()) / s_den if s_den else 0.5
            t = (row + rng.random()) / t_den if t_den else 0.5
            ray = camera.get_ray(s, t, rng)
            color = radiance(ray, world, lights, background, max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        line[i] = (r, g, b)
    return row, line


# Scene held by each worker process, set once by the pool initializer.
_worker_scene = None


def _init_worker(scene):
    global _worker_scene
    _worker_scene = scene


def _render_worker_row(job):
    return render_row(_worker_scene, *job)


def _render_scene_row(scene, job):
    return render_row(scene, *job)


class Renderer:
    """
    Offline renderer that splits the image into rows and renders them
    independently, inline or on a pool of workers.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = DEFAULT_SAMPLES,
                 max_depth: int = MAX_DEPTH, workers: Optional[int] = None,
                 seed: int = DEFAULT_SEED, executor: str = "process"):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        if executor not in ("process", "thread"):
            raise ValueError(f"executor must be 'process' or 'thread', got {executor!r}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.seed = seed
        self.executor = executor

    def _pool(self, scene):
        if self.executor == "thread":
            return futures.ThreadPoolExecutor(max_workers=self.workers)
        # Each worker process receives the scene once; jobs carry only rows.
        return futures.ProcessPoolExecutor(max_workers=self.workers,
                                           initializer=_init_worker, initargs=(scene,))

    def render_accumulated(self, scene) -> np.ndarray:
        """
        Returns the (height, width, 3) buffer of summed radiance, top row
        first.
        """
        accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        jobs = [
            (row, self.width, self.height, self.samples_per_pixel, self.max_depth, self.seed)
            for row in range(self.height)
        ]

        if self.workers is not None and self.workers <= 1:
            results = map(functools.partial(_render_scene_row, scene), jobs)
            for row, line in results:
                accumulation_buffer[self.height - 1 - row] = line
        else:
            with self._pool(scene) as pool:
                if self.executor == "thread":
                    results = pool.map(functools.partial(_render_scene_row, scene), jobs)
                else:
                    results = pool.map(_render_worker_row, jobs)
                for row, line in results:
                    accumulation_buffer[self.height - 1 - row] = line
        return accumulation_buffer

    def render(self, scene) -> np.ndarray:
        """
        Renders the scene and returns a top-down (height, width, 3) uint8
        image.
        """
        logger.info("Rendering %dx%d at %d spp, max depth %d, workers=%s (%s)",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.workers, self.executor)
        start = time.perf_counter()
        accumulated = self.render_accumulated(scene)
        pixels = to_rgb8(accumulated, self.samples_per_pixel)
        logger.info("Rendered in %.2fs", time.perf_counter() - start)
        return pixels
