# pathtracer/renderer/tone_mapping.py
import math
from typing import Sequence

import numpy as np
from numba import njit

from pathtracer.core.color import INTENSITY, Color

INTENSITY_MIN = INTENSITY.min
INTENSITY_MAX = INTENSITY.max


def colors_to_array(colors: Sequence[Color], width: int, height: int) -> np.ndarray:
    """
    Packs a row-major list of colors into a float64 array of shape (height, width, 3).
    """
    if len(colors) != width * height:
        raise ValueError(f"got {len(colors)} colors for a {width}x{height} image")
    image = np.empty((height, width, 3), dtype=np.float64)
    flat = image.reshape(-1, 3)
    for i, color in enumerate(colors):
        flat[i, 0] = color.r
        flat[i, 1] = color.g
        flat[i, 2] = color.b
    return image


@njit
def _gamma_quantize_kernel(image, output, gamma_correct):
    height, width, channels = image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = image[y, x, c]
                if gamma_correct:
                    value = math.sqrt(value) if value > 0.0 else 0.0
                # Same clamp and floor as Color.to_rgb_bytes.
                if value < INTENSITY_MIN:
                    value = INTENSITY_MIN
                elif value > INTENSITY_MAX:
                    value = INTENSITY_MAX
                output[y, x, c] = int(255 * value)


def gamma_quantize(image: np.ndarray, gamma_correct: bool = True) -> np.ndarray:
    """
    Converts a linear float image to 8-bit RGB, optionally applying gamma 2
    first. Matches Color.gamma_correct().to_rgb_bytes() channel for channel.
    """
    image = np.ascontiguousarray(image, dtype=np.float64)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"expected an array of shape (height, width, 3), got {image.shape}")
    output = np.zeros(image.shape, dtype=np.uint8)
    _gamma_quantize_kernel(image, output, gamma_correct)
    return output
