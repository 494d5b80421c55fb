"""Spherical lenses."""

from __future__ import annotations

from dataclasses import dataclass

from lightpath.vector import Vector


@dataclass(frozen=True)
class SphericalLens:
    """A sphere of transparent material with a given refractive index."""

    origin: Vector
    radius: float
    refractive_index: float

    def __str__(self) -> str:
        return (
            f"Lens: Origin: {self.origin} Radius: {self.radius:g} "
            f"n: {self.refractive_index:g}\n"
        )