"""Light rays and their interaction with lenses and mirrors."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from lightpath.lenses import SphericalLens
from lightpath.mirror import Mirror
from lightpath.vector import (
    MAX_T,
    MIN_ENERGY_DENSITY,
    MIN_EPS,
    Vector,
    angle,
    rotate_about_axis,
    smallest_positive_root,
)

DEFAULT_WAVELENGTH = 550e-9
"""Wavelength in metres given to rays unless stated otherwise."""

REFRACTED_SHARE = 0.98
"""Share of a ray's energy density passed on to the refracted ray."""

REFLECTED_SHARE = 0.02
"""Share of a ray's energy density passed on to the reflected ray."""


def _to_single_precision(value: float) -> float:
    """Round ``value`` to the nearest IEEE single-precision number."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class Ray:
    """A ray of light travelling from ``origin`` along ``direction``.

    The direction is normalised on construction. ``end_t`` and ``end`` are
    filled in once the ray has been tested against an obstacle.
    """

    origin: Vector
    direction: Vector
    energy_density: float
    refractive_index: float = 1.0
    wavelength: float = DEFAULT_WAVELENGTH
    end_t: float = field(default=0.0, init=False)
    end: Vector = field(default_factory=Vector, init=False)

    def __post_init__(self) -> None:
        self.direction = self.direction.normalized()

    def __str__(self) -> str:
        return (
            f"Ray: Origin: {self.origin} Direction: {self.direction} "
            f"t_End: {self.end_t:g}  END: {self.end}\n"
        )

    def end_point(self) -> Vector:
        """Return the point reached at ``end_t``."""
        return self.origin + self.end_t * self.direction

    def plot_command(self) -> str:
        """Return a matplotlib line drawing this ray in the x-z plane."""
        color = "blue" if self.refractive_index == 1 else "orange"
        return (
            f"ax.plot(({self.origin.x:g},{self.end.x:g}), "
            f"({self.origin.z:g},{self.end.z:g}), "
            f"linewidth={2 * self.energy_density:g}, color='{color}')\n"
        )

    def _stop_at_max_time(self) -> None:
        self.end_t = MAX_T
        self.end = self.origin + self.end_t * self.direction

    def reflect_and_refract(
        self, surface_normal: Vector, rotation_axis: Vector, n2: float
    ) -> list[Ray]:
        """Split the ray at its end point into a refracted and a reflected ray.

        The refracted ray enters the medium of index ``n2``; the reflected ray
        stays in this ray's medium. Both are obtained by rotating the current
        direction about ``rotation_axis``.
        """
        theta1 = angle(surface_normal, self.direction)
        theta2 = self.refractive_index / n2 * math.sin(theta1)
        dtheta = theta2 - theta1
        refraction_direction = rotate_about_axis(
            self.direction, rotation_axis, -dtheta
        )
        reflection_direction = rotate_about_axis(
            self.direction, rotation_axis, -(math.pi - 2 * theta1)
        )
        return [
            Ray(
                self.end,
                refraction_direction,
                self.energy_density * REFRACTED_SHARE,
                n2,
            ),
            Ray(
                self.end,
                reflection_direction,
                self.energy_density * REFLECTED_SHARE,
                self.refractive_index,
            ),
        ]

    def collide_with_lens(self, lens: SphericalLens) -> list[Ray]:
        """Trace the ray to ``lens`` and return the rays it gives rise to.

        Rays too weak to follow produce nothing. A ray that misses or only
        touches the sphere ends after ``MAX_T`` and produces nothing. Otherwise
        the ray ends at the first intersection and is split into a refracted
        and a reflected ray.
        """
        if self.energy_density < MIN_ENERGY_DENSITY:
            return []

        o = self.origin
        d = self.direction
        c = lens.origin
        radius = lens.radius
        v = c - o
        t_p = v.dot(d)
        if t_p <= MIN_EPS:
            self._stop_at_max_time()
            return []

        closest = o + t_p * d
        distance = (closest - c).magnitude()
        if distance * distance >= radius * radius:
            self._stop_at_max_time()
            return []

        self.end_t = smallest_positive_root(
            d.dot(d), -2 * d.dot(v), v.dot(v) - radius * radius
        )
        self.end = o + self.end_t * d

        if self.refractive_index != lens.refractive_index:
            surface_normal = (c - self.end).normalized()
            n2 = lens.refractive_index
        else:
            surface_normal = (self.end - c).normalized()
            n2 = 1.0
        rotation_axis = d.cross(surface_normal).normalized()
        return self.reflect_and_refract(surface_normal, rotation_axis, n2)

    def collide_with_mirror(self, mirror: Mirror) -> list[Ray]:
        """Trace the ray to ``mirror`` and return the reflected ray, if any."""
        p1 = mirror.origin
        p2 = mirror.side_a + p1
        p3 = mirror.side_b + p1

        a = (
            p1.y * p2.z - p2.y * p1.z + p2.y * p3.z
            - p3.y * p2.z + p3.y * p1.z - p1.y * p3.z
        )
        b = (
            p1.z * p2.x - p2.z * p1.x + p2.z * p3.x
            - p3.z * p2.x + p3.z * p1.x - p1.z * p3.x
        )
        c = (
            p1.x * p2.y - p2.x * p1.y + p2.x * p3.y
            - p3.x * p2.y + p3.x * p1.y - p1.x * p3.y
        )
        d = (
            p1.x * p2.y * p3.z - p1.x * p3.y * p2.z
            + p2.x * p3.y * p1.z - p2.x * p1.y * p3.z
            + p3.x * p1.y * p2.z - p3.x * p2.y * p1.z
        )
        plane = Vector(a, b, c)

        approach = plane.dot(self.direction)
        if approach == 0:
            return []

        t_hit = d / approach
        p_hit = self.origin + t_hit * self.direction
        offset = p_hit - mirror.origin
        a_component = (
            mirror.side_a.normalized().dot(offset) / mirror.side_a.magnitude()
        )
        b_component = (
            mirror.side_b.normalized().dot(offset) / mirror.side_b.magnitude()
        )
        if not (0 < a_component < 1 and 0 < b_component < 1):
            return []

        self.end_t = t_hit
        self.end = self.origin + self.end_t * self.direction

        normal = mirror.surface_normal
        perpendicular = self.direction.cross(normal)
        if perpendicular.magnitude() == 0:
            reflection_direction = -self.direction
        else:
            rotation_axis = perpendicular.normalized()
            theta1 = angle(normal, self.direction)
            reflection_direction = rotate_about_axis(
                self.direction, rotation_axis, -(math.pi - 2 * theta1)
            )

        return [
            Ray(
                self.end,
                reflection_direction,
                self.energy_density * mirror.reflectance,
                self.refractive_index,
            )
        ]


def make_parallel_rays(
    direction: Vector,
    first: Vector,
    last: Vector,
    steps: int,
    energy_density: float,
    n: float,
    wavelength: float,
) -> list[Ray]:
    """Return ``steps`` parallel rays starting evenly spaced from ``first``.

    The starting points run from ``first`` towards ``last``; ``last`` itself
    is not included.
    """
    span = last - first
    return [
        Ray(
            first + _to_single_precision(i / steps) * span,
            direction,
            energy_density,
            n,
            wavelength,
        )
        for i in range(steps)
    ]