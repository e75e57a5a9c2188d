# pathtracer/materials/normal_map.py
from typing import Tuple

import numpy as np

from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, diffuse_direction


class NormalMap(Material):
    """
    Debug material: diffuse scattering tinted by the surface normal.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Color]:
        n = rec.normal
        attenuation = Color(n.x, n.y, n.z)
        return Ray(rec.p, diffuse_direction(rec, rng)), attenuation

    def __repr__(self) -> str:
        return "NormalMap()"
