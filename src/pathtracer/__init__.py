"""A CPU path tracer for scenes of spheres."""

from pathtracer.camera.camera import Camera
from pathtracer.core.color import Color
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3
from pathtracer.errors import CameraError, ImageEncodingError, PathTracerError
from pathtracer.geometry.hittable import HitRecord, Hittable, Orientation
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials import Dielectric, Lambertian, Material, Metal, NormalMap, ProbabilisticLambertian

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "CameraError",
    "Color",
    "Dielectric",
    "HitRecord",
    "Hittable",
    "HittableList",
    "ImageEncodingError",
    "Interval",
    "Lambertian",
    "Material",
    "Metal",
    "NormalMap",
    "Orientation",
    "PathTracerError",
    "Point3",
    "ProbabilisticLambertian",
    "Ray",
    "Sphere",
    "Vector3",
]
