import math

import pytest

from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry.hittable import HitRecord, Hittable, Orientation
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList

from tests.helpers import assert_vec_close

FORWARD = Interval(0.001, math.inf)


class TestSphere:
    def test_returns_nearest_root(self, sphere_ahead):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere_ahead.hit(ray, FORWARD)
        assert rec is not None
        assert rec.t == pytest.approx(2.0)
        assert_vec_close(rec.p, Point3(0, 0, -2))
        assert_vec_close(rec.normal, Vector3(0, 0, 1))
        assert rec.orientation is Orientation.EXTERIOR
        assert rec.front_face
        assert rec.material is sphere_ahead.material

    def test_far_root_when_near_root_is_excluded(self, sphere_ahead):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere_ahead.hit(ray, Interval(2.5, math.inf))
        assert rec.t == pytest.approx(4.0)
        assert_vec_close(rec.p, Point3(0, 0, -4))
        # Outward normal points along the ray, so it is flipped.
        assert_vec_close(rec.normal, Vector3(0, 0, 1))
        assert rec.orientation is Orientation.INTERIOR
        assert ray.direction.dot(rec.normal) <= 0

    def test_ray_from_inside(self, sphere_ahead):
        ray = Ray(Point3(0, 0, -3), Vector3(0, 1, 0))
        rec = sphere_ahead.hit(ray, FORWARD)
        assert rec.t == pytest.approx(1.0)
        assert rec.orientation is Orientation.INTERIOR
        assert_vec_close(rec.normal, Vector3(0, -1, 0))

    def test_non_unit_direction(self, sphere_ahead):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -2))
        rec = sphere_ahead.hit(ray, FORWARD)
        assert rec.t == pytest.approx(1.0)
        assert_vec_close(rec.p, Point3(0, 0, -2))
        assert rec.normal.length() == pytest.approx(1.0)

    def test_miss(self, sphere_ahead):
        assert sphere_ahead.hit(Ray(Point3(0, 0, 0), Vector3(0, 1, 0)), FORWARD) is None
        assert sphere_ahead.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, 1)), FORWARD) is None

    def test_hit_outside_interval(self, sphere_ahead):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert sphere_ahead.hit(ray, Interval(0.001, 1.5)) is None
        assert sphere_ahead.hit(ray, Interval(4.5, math.inf)) is None

    def test_interval_bounds_are_exclusive(self, sphere_ahead):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere_ahead.hit(ray, Interval(2.0, 10.0))
        assert rec.t == pytest.approx(4.0)

    def test_normal_always_opposes_ray(self, gray, rng):
        sphere = Sphere(Point3(0.3, -0.2, -2), 0.7, gray)
        for _ in range(200):
            origin = Point3(*rng.uniform(-1.5, 1.5, 3)) + Point3(0, 0, -2)
            direction = Vector3(*rng.uniform(-1, 1, 3))
            rec = sphere.hit(Ray(origin, direction), FORWARD)
            if rec is not None:
                assert direction.dot(rec.normal) <= 0
                assert FORWARD.surrounds(rec.t)


class TestHitRecord:
    def test_from_outward_normal(self):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = HitRecord.from_outward_normal(ray, Point3(0, 0, -1), Vector3(0, 0, 1), 1.0)
        assert rec.orientation is Orientation.EXTERIOR
        rec = HitRecord.from_outward_normal(ray, Point3(0, 0, -1), Vector3(0, 0, -1), 1.0)
        assert rec.orientation is Orientation.INTERIOR
        assert rec.normal == Vector3(0, 0, 1)
        assert not rec.front_face

    def test_hittable_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Hittable().hit(Ray(Point3(0, 0, 0), Vector3(1, 0, 0)), FORWARD)


class TestHittableList:
    def test_empty_list_misses(self, empty_world):
        assert empty_world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), FORWARD) is None
        assert len(empty_world) == 0

    def test_closest_hit_regardless_of_order(self, gray):
        near = Sphere(Point3(0, 0, -3), 1.0, gray)
        far = Sphere(Point3(0, 0, -6), 1.0, gray)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        for objects in ([near, far], [far, near]):
            world = HittableList(objects)
            rec = world.hit(ray, FORWARD)
            assert rec.t == pytest.approx(2.0)

    def test_respects_interval(self, gray):
        world = HittableList([Sphere(Point3(0, 0, -3), 1.0, gray), Sphere(Point3(0, 0, -6), 1.0, gray)])
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = world.hit(ray, Interval(4.5, math.inf))
        assert rec.t == pytest.approx(5.0)

    def test_add_and_clear(self, sphere_ahead):
        world = HittableList()
        world.add(sphere_ahead)
        world.add(sphere_ahead)
        assert len(world) == 2
        assert list(world) == [sphere_ahead, sphere_ahead]
        world.clear()
        assert len(world) == 0
