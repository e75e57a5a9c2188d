# pathtracer/materials/material.py
from typing import Optional, Tuple

import numpy as np

from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once built and may be shared by any number of
    objects.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")


def diffuse_direction(rec: HitRecord, rng: np.random.Generator) -> Vector3:
    """
    Picks a cosine-weighted direction around the hit normal, falling back to
    the normal itself when the sample nearly cancels it.
    """
    scatter_direction = rec.normal + random_unit_vector(rng)
    if scatter_direction.almost_zero():
        return rec.normal
    return scatter_direction
