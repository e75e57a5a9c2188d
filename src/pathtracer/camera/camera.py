# pathtracer/camera/camera.py
import logging
import math
import numbers
import time
from typing import Iterable, List, Optional, Tuple

import numpy as np

from pathtracer import config
from pathtracer.core.color import Color
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.utils import make_rng, random_in_unit_disk
from pathtracer.core.vector import Point3, Vector3
from pathtracer.errors import CameraError
from pathtracer.geometry.hittable import Hittable

logger = logging.getLogger(__name__)

SKY_BLUE = Color(0.5, 0.7, 1.0)


class Camera:
    """
    Positionable pinhole or thin-lens camera.

    Every derived quantity (image height, orthonormal basis, pixel grid and
    defocus disk) is computed once at construction; the camera is read-only
    afterwards and safe to share between render workers.
    """

    # Non-zero lower bound prevents shadow acne.
    T_BOUNDS = Interval(config.T_MIN, math.inf)

    def __init__(self,
                 aspect_ratio: float = 1.0,
                 image_width: int = 100,
                 samples_per_pixel: int = 10,
                 max_depth: int = 10,
                 vfov: float = 90.0,
                 look_from: Point3 = Point3(0, 0, 0),
                 look_at: Point3 = Point3(0, 0, -1),
                 up: Vector3 = Vector3(0, 1, 0),
                 defocus_angle: float = 0.0,
                 focus_distance: float = 1.0):
        if not aspect_ratio > 0:
            raise CameraError(f"aspect_ratio must be greater than 0 (given {aspect_ratio})")
        image_width = _positive_int("image_width", image_width)
        samples_per_pixel = _positive_int("samples_per_pixel", samples_per_pixel)
        max_depth = _positive_int("max_depth", max_depth)
        if not 0 < vfov < 180:
            raise CameraError(f"vfov must lie within (0, 180) degrees (given {vfov})")
        if not focus_distance > 0:
            raise CameraError(f"focus_distance must be greater than 0 (given {focus_distance})")
        if not defocus_angle >= 0:
            raise CameraError(f"defocus_angle must not be negative (given {defocus_angle})")
        if look_from.almost_eq(look_at):
            raise CameraError(f"look_from and look_at must differ (both {look_from})")

        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.image_height = max(1, int(round(image_width / aspect_ratio)))
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.vfov = vfov
        self.look_from = look_from
        self.look_at = look_at
        self.up = up
        self.defocus_angle = defocus_angle
        self.focus_distance = focus_distance

        self.center = look_from

        # Orthonormal camera basis: w points backwards, u right, v up.
        self.w = (look_from - look_at).normalize()
        u = up.cross(self.w)
        if u.almost_zero():
            raise CameraError(f"up {up} must not be parallel to the view direction")
        self.u = u.normalize()
        self.v = self.w.cross(self.u)

        # Viewport dimensions on the focus plane.
        h = math.tan(math.radians(vfov) / 2)
        viewport_height = 2.0 * h * focus_distance
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Edge vectors; v is flipped so row 0 is the top of the image.
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * focus_distance
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = focus_distance * math.tan(math.radians(defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def dim(self) -> Tuple[int, int]:
        """Image dimensions as (width, height)."""
        return self.image_width, self.image_height

    def get_ray(self, row: int, col: int, rng: np.random.Generator) -> Ray:
        """
        Builds a ray towards a jittered point inside pixel (row, col). With a
        positive defocus angle the origin is sampled from the defocus disk.
        """
        px, py = rng.random(2) - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (col + px)
                        + self.pixel_delta_v * (row + py))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng: np.random.Generator) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def ray_color(self, ray: Ray, depth: int, world: Hittable,
                  rng: np.random.Generator) -> Color:
        """
        Radiance carried back along ray, following at most depth bounces.
        """
        if depth <= 0:
            return Color.BLACK

        rec = world.hit(ray, self.T_BOUNDS)
        if rec is not None:
            scatter = rec.material.scatter(ray, rec, rng)
            if scatter is None:
                return Color.BLACK
            scattered, attenuation = scatter
            return attenuation * self.ray_color(scattered, depth - 1, world, rng)

        # Sky: white at the horizon blending to blue overhead.
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return Color.WHITE * (1.0 - a) + SKY_BLUE * a

    def render_rows(self, world: Hittable, rows: Iterable[int],
                    rng: np.random.Generator) -> List[Color]:
        """
        Renders the given rows, left to right, and returns their averaged
        pixel colors in the same order.
        """
        pixels = []
        scale = 1.0 / self.samples_per_pixel
        for row in rows:
            for col in range(self.image_width):
                pixel_color = Color(0.0, 0.0, 0.0)
                for _ in range(self.samples_per_pixel):
                    ray = self.get_ray(row, col, rng)
                    pixel_color = pixel_color + self.ray_color(ray, self.max_depth, world, rng)
                pixels.append(pixel_color * scale)
            logger.debug("Rendered row %d/%d", row + 1, self.image_height)
        return pixels

    def render(self, world: Hittable, rng: Optional[np.random.Generator] = None) -> List[Color]:
        """
        Renders the whole image. Returns one Color per pixel, row-major from
        the top-left corner.
        """
        if rng is None:
            rng = make_rng(config.SEED)

        t0 = time.perf_counter()
        pixels = self.render_rows(world, range(self.image_height), rng)
        elapsed = time.perf_counter() - t0
        logger.info("Rendered %dx%d image at %d samples/pixel in %.2fs",
                    self.image_width, self.image_height, self.samples_per_pixel, elapsed)
        return pixels

    def __repr__(self) -> str:
        return (f"Camera({self.image_width}x{self.image_height}, spp={self.samples_per_pixel}, "
                f"max_depth={self.max_depth}, vfov={self.vfov})")


def _positive_int(name: str, value) -> int:
    """Accepts whole numbers greater than 0, including integral floats."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) \
            or not float(value).is_integer() or value <= 0:
        raise CameraError(f"{name} must be a whole number greater than 0 (given {value})")
    return int(value)
