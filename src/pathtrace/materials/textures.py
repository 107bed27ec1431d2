# materials/textures.py
import math
from typing import Union

import numpy as np
from PIL import Image

from pathtrace.core.vector import Vector3
from pathtrace.materials.perlin import Perlin


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """
    Materials accept either a plain colour or a texture; colours are wrapped
    in a SolidColor.
    """
    if isinstance(albedo, Texture):
        return albedo
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    raise TypeError(f"expected a Vector3 or Texture, got {type(albedo).__name__}")


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)·sin(sy)·sin(sz) picks between
    the odd and even textures, so it needs no surface parametrization.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        s = self.scale
        sines = math.sin(s * p.x) * math.sin(s * p.y) * math.sin(s * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        # Image.open raises FileNotFoundError for a missing file.
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            # Convert to numpy array for faster access
            self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
            self.width = img.width
            self.height = img.height

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Clamp input coordinates to [0,1] x [1,0]
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image row order

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, perlin: Perlin, scale: float = 1.0):
        self.noise = perlin
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        marble = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p)))
        return Vector3(1, 1, 1) * marble
