"""Geometric ray tracing of light through spherical lenses and flat mirrors."""

__version__ = "0.1.0"
__all__ = ["lenses", "mirror", "ray", "vector"]