# renderer/tone_mapping.py
import numpy as np
from numba import njit
from PIL import Image


@njit(cache=True)
def gamma_quantize_kernel(accumulated, samples_per_pixel, output_image):
    """
    Averages summed samples, applies gamma 2 and quantizes to 8 bits.
    NaN channels count as black.
    """
    scale = 1.0 / samples_per_pixel
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = accumulated[y, x, c]
                if value != value:
                    value = 0.0
                value = value * scale
                if value < 0.0:
                    value = 0.0
                value = np.sqrt(value)
                # Clamp to [0, 0.999] so 256 * value stays below 256
                if value > 0.999:
                    value = 0.999
                output_image[y, x, c] = np.uint8(int(256.0 * value))


def to_rgb8(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Convert a (height, width, 3) buffer of summed linear radiance to 8-bit
    RGB.
    """
    if samples_per_pixel <= 0:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.zeros(accumulated.shape, dtype=np.uint8)
    gamma_quantize_kernel(accumulated, samples_per_pixel, output)
    return output


def save_image(pixels: np.ndarray, path: str):
    """Write a top-down (height, width, 3) uint8 array as an image file."""
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
