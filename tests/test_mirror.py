import dataclasses
import math

import pytest

from lightpath.mirror import Mirror
from lightpath.vector import Vector


def make_mirror(reflectance: float = 1.0) -> Mirror:
    return Mirror(Vector(5, -1, 0), Vector(0, 5, 0), Vector(0, 0, 5), reflectance)


def test_surface_normal_of_axis_aligned_mirror():
    assert make_mirror().surface_normal == Vector(1.0, 0.0, 0.0)


def test_surface_normal_is_unit_and_perpendicular():
    m = Mirror(Vector(5, -2, -2), Vector(0, 5, 0), Vector(5, 0, 3), 1.0)
    n = m.surface_normal
    assert math.isclose(n.magnitude(), 1.0)
    assert abs(n.dot(m.side_a)) < 1e-12
    assert abs(n.dot(m.side_b)) < 1e-12


def test_swapping_sides_flips_normal():
    m = make_mirror()
    swapped = Mirror(m.origin, m.side_b, m.side_a, m.reflectance)
    assert swapped.surface_normal == -m.surface_normal


@pytest.mark.parametrize("reflectance", [0.0, 0.25, 0.9, 1.0])
def test_reflectance_and_transmittance_sum_to_one(reflectance):
    m = make_mirror(reflectance)
    assert math.isclose(m.reflectance + m.transmittance, 1.0)


def test_perfect_mirror_transmits_nothing():
    assert make_mirror(1.0).transmittance == 0.0


def test_mirror_is_immutable():
    m = make_mirror()
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.reflectance = 0.5
    assert m.reflectance == 1.0