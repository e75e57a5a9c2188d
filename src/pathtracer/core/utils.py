# pathtracer/core/utils.py
from typing import List, Optional

import numpy as np

from pathtracer.core.vector import Vector3


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Builds a random generator. A None seed draws fresh entropy.
    """
    return np.random.default_rng(seed)


def spawn_rngs(seed: Optional[int], n: int) -> List[np.random.Generator]:
    """
    Builds n statistically independent generators from a single seed, one per
    render worker.
    """
    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]


def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        x, y, z = rng.uniform(-1.0, 1.0, 3)
        p = Vector3(x, y, z)
        # Points too close to the origin would blow up when normalized.
        if 1e-160 < p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: np.random.Generator) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng: np.random.Generator) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        x, y = rng.uniform(-1.0, 1.0, 2)
        p = Vector3(x, y, 0)
        if p.dot(p) < 1:
            return p
