"""Flat rectangular mirrors."""

from __future__ import annotations

from dataclasses import dataclass

from lightpath.vector import Vector


@dataclass(frozen=True)
class Mirror:
    """A parallelogram spanned by two sides from a corner at ``origin``."""

    origin: Vector
    side_a: Vector
    side_b: Vector
    reflectance: float

    @property
    def surface_normal(self) -> Vector:
        """Unit normal, ``side_a x side_b`` normalised."""
        return self.side_a.cross(self.side_b).normalized()

    @property
    def transmittance(self) -> float:
        """Fraction of light that is not reflected."""
        return 1 - self.reflectance