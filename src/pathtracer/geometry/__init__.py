from pathtracer.geometry.hittable import HitRecord, Hittable, Orientation
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "HittableList", "Orientation", "Sphere"]
