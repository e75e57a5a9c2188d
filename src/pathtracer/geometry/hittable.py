# pathtracer/geometry/hittable.py
import enum
from typing import Optional

from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3


class Orientation(enum.Enum):
    """Which side of the surface the ray arrived from."""
    EXTERIOR = "exterior"
    INTERIOR = "interior"


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "orientation", "material")

    def __init__(self, p: Point3, normal: Vector3, t: float,
                 orientation: Orientation = Orientation.EXTERIOR, material=None):
        self.p = p                        # Intersection point
        self.normal = normal              # Surface normal, always against the ray
        self.t = t                        # Ray parameter at intersection
        self.orientation = orientation
        self.material = material

    @classmethod
    def from_outward_normal(cls, ray: Ray, p: Point3, outward_normal: Vector3,
                            t: float, material=None) -> "HitRecord":
        """
        Builds a record whose normal opposes the incoming ray. A normal that
        had to be flipped marks the hit as interior.
        """
        if ray.direction.dot(outward_normal) < 0:
            return cls(p, outward_normal, t, Orientation.EXTERIOR, material)
        return cls(p, -outward_normal, t, Orientation.INTERIOR, material)

    @property
    def front_face(self) -> bool:
        return self.orientation is Orientation.EXTERIOR

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, t={self.t}, "
                f"orientation={self.orientation.name})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """
        Returns the nearest intersection whose parameter lies strictly inside
        ray_t, or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
