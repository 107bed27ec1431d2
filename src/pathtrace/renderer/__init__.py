from pathtrace.renderer.integrator import MAX_DEPTH, T_MIN, radiance
from pathtrace.renderer.raytracer import DEFAULT_SAMPLES, QUALITY_LEVELS, Renderer
from pathtrace.renderer.tone_mapping import save_image, to_rgb8

__all__ = [
    "MAX_DEPTH", "T_MIN", "radiance", "DEFAULT_SAMPLES", "QUALITY_LEVELS",
    "Renderer", "save_image", "to_rgb8",
]
