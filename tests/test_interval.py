import math

from pathtracer.core.interval import Interval


def test_interval_general():
    interval = Interval(-2.0, 5.0)

    assert interval.contains(0.0)
    assert interval.contains(-2.0)
    assert interval.contains(5.0)
    assert not interval.contains(-2.1)
    assert not interval.contains(5.1)

    assert interval.surrounds(0.0)
    assert not interval.surrounds(-2.0)
    assert not interval.surrounds(5.0)
    assert not interval.surrounds(-2.1)
    assert not interval.surrounds(5.1)

    assert interval.clamp(3.0) == 3.0
    assert interval.clamp(-2.1) == -2.0
    assert interval.clamp(5.1) == 5.0
    assert interval.size() == 7.0


def test_clamp_is_idempotent():
    interval = Interval(0.0, 0.999)
    for x in (-10.0, -0.0, 0.3, 0.999, 1.0, 42.0):
        once = interval.clamp(x)
        assert interval.clamp(once) == once
        assert interval.contains(once)


def test_empty_and_universe():
    assert not Interval.EMPTY.contains(0.0)
    assert not Interval.EMPTY.contains(1000000.0)
    assert Interval.UNIVERSE.contains(0.0)
    assert Interval.UNIVERSE.contains(1000000.0)
    assert Interval.UNIVERSE.surrounds(-1e300)
    assert Interval() == Interval.EMPTY


def test_min_greater_than_max():
    interval = Interval(10.0, 9.0)

    assert not interval.contains(0.0)
    assert not interval.contains(10.0)
    assert not interval.contains(9.0)
    assert not interval.surrounds(9.5)


def test_half_open_ray_bounds():
    bounds = Interval(0.001, math.inf)
    assert not bounds.surrounds(0.0)
    assert not bounds.surrounds(0.001)
    assert bounds.surrounds(1e12)
