# pathtracer/renderer/image.py
import logging
import os
from pathlib import Path
from typing import Sequence, Union

import numpy as np
from PIL import Image

from pathtracer.core.color import Color
from pathtracer.errors import ImageEncodingError
from pathtracer.renderer.tone_mapping import colors_to_array, gamma_quantize

logger = logging.getLogger(__name__)

PPM_MAGIC_NUMBER = b"P6"
BITDEPTH_MIN = 1
BITDEPTH_MAX = 255
PPM_SUFFIXES = (".ppm", ".pnm")

PathLike = Union[str, os.PathLike]


def validate_image(data: bytes, width: int, height: int, bitdepth: int = 255) -> None:
    """
    Checks a flat interleaved RGB buffer against its dimensions and bit depth.

    Raises:
        ImageEncodingError: on any mismatch
    """
    if width <= 0 or height <= 0:
        raise ImageEncodingError(f"image dimensions must be greater than 0 (given {width}x{height})")
    if not BITDEPTH_MIN <= bitdepth <= BITDEPTH_MAX:
        raise ImageEncodingError(
            f"bitdepth must fall within the range [{BITDEPTH_MIN},{BITDEPTH_MAX}] (given {bitdepth})")
    expected = width * height * 3
    if len(data) != expected:
        raise ImageEncodingError(
            f"buffer size ({len(data)}) does not match dimensions ({width}*{height}*3={expected})")
    if data and max(data) > bitdepth:
        raise ImageEncodingError(f"channel value {max(data)} is invalid, expected channel<={bitdepth}")


def encode_ppm(data: bytes, width: int, height: int, bitdepth: int = 255) -> bytes:
    """
    Returns a binary (P6) PPM file for the buffer.
    """
    data = bytes(data)
    validate_image(data, width, height, bitdepth)
    header = b"%s\n%d %d %d\n" % (PPM_MAGIC_NUMBER, width, height, bitdepth)
    return header + data


def write_image(path: PathLike, data: bytes, width: int, height: int, bitdepth: int = 255) -> Path:
    """
    Writes an interleaved RGB buffer to path. The format follows the file
    extension; anything PIL can save from an RGB image is accepted. Bit
    depths below 255 are only representable as PPM.

    Raises:
        ImageEncodingError: if the buffer is malformed or the format cannot
            hold the bit depth
    """
    path = Path(path)
    data = bytes(data)
    validate_image(data, width, height, bitdepth)
    path.parent.mkdir(parents=True, exist_ok=True)

    if bitdepth != BITDEPTH_MAX:
        if path.suffix.lower() not in PPM_SUFFIXES:
            raise ImageEncodingError(f"bitdepth {bitdepth} can only be written as PPM, not {path.suffix!r}")
        path.write_bytes(encode_ppm(data, width, height, bitdepth))
    else:
        image = Image.frombytes("RGB", (width, height), data)
        try:
            image.save(path)
        except (KeyError, ValueError) as e:
            raise ImageEncodingError(f"Error writing image {path}: {e}") from e

    logger.info("Wrote %dx%d image to %s", width, height, path)
    return path


def read_image(path: PathLike) -> np.ndarray:
    """
    Loads an image file as a uint8 array of shape (height, width, 3).
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")
    with Image.open(path) as img:
        if img.mode != "RGB":
            img = img.convert("RGB")
        return np.asarray(img, dtype=np.uint8).copy()


def save_render(path: PathLike, colors: Sequence[Color], width: int, height: int,
                gamma_correct: bool = True) -> Path:
    """
    Quantizes rendered colors and writes them to path.
    """
    pixels = gamma_quantize(colors_to_array(colors, width, height), gamma_correct)
    return write_image(path, pixels.tobytes(), width, height)
