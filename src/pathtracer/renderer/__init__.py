from pathtracer.renderer.image import encode_ppm, read_image, save_render, write_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import colors_to_array, gamma_quantize

__all__ = [
    "Renderer",
    "colors_to_array",
    "encode_ppm",
    "gamma_quantize",
    "read_image",
    "save_render",
    "write_image",
]
