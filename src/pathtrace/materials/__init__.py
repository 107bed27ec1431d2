from pathtrace.materials.dielectric import Dielectric
from pathtrace.materials.diffuse_light import DiffuseLight
from pathtrace.materials.isotropic import Isotropic
from pathtrace.materials.lambertian import Lambertian
from pathtrace.materials.material import Material, ScatterRecord
from pathtrace.materials.metal import Metal
from pathtrace.materials.perlin import Perlin
from pathtrace.materials.textures import (
    CheckerTexture, ImageTexture, NoiseTexture, SolidColor, Texture,
)

__all__ = [
    "Dielectric", "DiffuseLight", "Isotropic", "Lambertian", "Material",
    "ScatterRecord", "Metal", "Perlin", "CheckerTexture", "ImageTexture",
    "NoiseTexture", "SolidColor", "Texture",
]
