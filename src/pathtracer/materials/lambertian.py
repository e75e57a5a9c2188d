# pathtracer/materials/lambertian.py
from typing import Optional, Tuple

import numpy as np

from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, diffuse_direction


class Lambertian(Material):
    """
    Lambertian diffuse material. Rays always scatter.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        scattered = Ray(rec.p, diffuse_direction(rec, rng))
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"


class ProbabilisticLambertian(Material):
    """
    Diffuse material that absorbs a ray with probability p instead of always
    scattering. With attenuate=True the albedo is divided by p when the
    material is built.
    """

    def __init__(self, albedo: Color, p: float, attenuate: bool = False):
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"p must lie within [0, 1] (given {p})")
        if attenuate and p == 0.0:
            raise ValueError("p must be greater than 0 when attenuate is set")
        self.albedo = albedo / p if attenuate else albedo
        self.p = p

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Ray, Color]]:
        if rng.random() <= self.p:
            return None
        scattered = Ray(rec.p, diffuse_direction(rec, rng))
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"ProbabilisticLambertian({self.albedo!r}, p={self.p})"
