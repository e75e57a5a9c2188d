"""Pytest configuration and shared fixtures."""

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.color import Color
from pathtracer.core.utils import make_rng
from pathtracer.core.vector import Point3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.scenes import single_sphere_scene


@pytest.fixture
def rng():
    """Provide a seeded generator so tests are reproducible."""
    return make_rng(1234)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def single_sphere_world():
    return single_sphere_scene()


@pytest.fixture
def empty_world():
    return HittableList()


@pytest.fixture
def sphere_ahead(gray):
    """Sphere of radius 1 centered three units down -z."""
    return Sphere(Point3(0, 0, -3), 1.0, gray)


@pytest.fixture
def small_camera():
    return Camera(aspect_ratio=2.0, image_width=8, samples_per_pixel=2, max_depth=3)
