# pathtracer/materials/dielectric.py
import math
from typing import Tuple

import numpy as np

from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.core.vector import reflect, refract
from pathtracer.geometry.hittable import HitRecord, Orientation
from pathtracer.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material such as glass or water. refractive_index is
    relative to a vacuum.
    """
    def __init__(self, refractive_index: float):
        self.refractive_index = refractive_index

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Color]:
        attenuation = Color.WHITE  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        if rec.orientation is Orientation.EXTERIOR:
            ri = 1.0 / self.refractive_index
        else:
            ri = self.refractive_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        # One draw per call keeps the random stream independent of the branch.
        reflect_roll = rng.random() < schlick(cos_theta, ri)

        if cannot_refract or reflect_roll:
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return Ray(rec.p, direction), attenuation

    def __repr__(self) -> str:
        return f"Dielectric({self.refractive_index})"


def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of Fresnel reflectance. cosine is the dot of the
    unit incident direction (negated) and the unit normal.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
