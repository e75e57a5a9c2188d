# pathtracer/scenes.py
"""Named demo scenes."""
from typing import Callable, Dict

from pathtracer.core.color import Color
from pathtracer.core.vector import Point3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.normal_map import NormalMap
from pathtracer.materials.presets import ColorPresets, DielectricPresets


def single_sphere_scene() -> HittableList:
    """A diffuse sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.5, 0.5, 0.5))))
    world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.5, 0.5, 0.5))))
    return world


def material_showcase_scene() -> HittableList:
    """Diffuse, glass and metal spheres side by side."""
    world = HittableList()

    mat_ground = Lambertian(ColorPresets.YELLOW)
    mat_center = Lambertian(ColorPresets.BLUE)
    mat_left = DielectricPresets.glass()
    mat_bubble = DielectricPresets.bubble(1.5)
    mat_right = Metal(Color(0.8, 0.6, 0.2), 1.0)

    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, mat_ground))
    world.add(Sphere(Point3(0.0, 0.0, -1.2), 0.5, mat_center))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, mat_left))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.4, mat_bubble))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, mat_right))
    return world


def metal_scene() -> HittableList:
    """The original metal demo: one matte sphere between two metals."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))))
    world.add(Sphere(Point3(0.0, 0.0, -1.2), 0.5, Lambertian(Color(0.1, 0.2, 0.5))))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, Metal(Color(0.8, 0.8, 0.8), 0.3)))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, Metal(Color(0.6, 0.6, 0.2), 1.0)))
    return world


def normals_scene() -> HittableList:
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5, NormalMap()))
    world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(ColorPresets.GRAY)))
    return world


SCENES: Dict[str, Callable[[], HittableList]] = {
    "single": single_sphere_scene,
    "showcase": material_showcase_scene,
    "metal": metal_scene,
    "normals": normals_scene,
}


def get_scene(name: str) -> HittableList:
    try:
        factory = SCENES[name]
    except KeyError:
        raise KeyError(f"unknown scene {name!r}, expected one of {sorted(SCENES)}") from None
    return factory()
