# lightpath

A small geometric ray tracer for light. Rays travel in straight lines until
they meet a spherical lens or a flat rectangular mirror.

- At a lens, a ray splits in two. The refracted part enters the new medium and
  keeps 98 % of the energy density. The reflected part stays in the old medium
  and keeps the remaining 2 %.
- At a mirror, a ray is reflected. The reflected ray carries the ray's energy
  density multiplied by the mirror's reflectance.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from lightpath.vector import Vector, MAX_RAYS
from lightpath.lenses import SphericalLens
from lightpath.ray import make_parallel_rays

lens = SphericalLens(Vector(10, 0, 0), 1.0, 1.33)
rays = make_parallel_rays(
    Vector(1, 0, 0), Vector(0, 0, -1), Vector(0, 0, 1),
    50, 1.0, 1.0, 550e-9,
)

for ray in rays:
    if len(rays) >= MAX_RAYS:
        break
    rays.extend(ray.collide_with_lens(lens)[: MAX_RAYS - len(rays)])

script_lines = [ray.plot_command() for ray in rays]
```

### Modules

`lightpath.vector`
- `Vector` is an immutable 3D vector. It supports `+`, `-`, multiplication and
  division by a scalar, and negation. It also has `dot`, `cross`, `magnitude`
  and `normalized`. Normalising the zero vector gives NaN components.
- `angle(a, b)` returns the angle between two vectors, in radians.
- `rotate_about_axis(v, axis, theta)` rotates `v` about a unit axis.
- `smallest_positive_root(a, b, c)` solves a quadratic. It returns the smaller
  root when that root is above `MIN_EPS`, and the larger root otherwise. It
  raises `ValueError` when the quadratic has no real root.
- The module also defines the constants `MAX_T`, `MIN_EPS`, `MAX_RAYS` and
  `MIN_ENERGY_DENSITY`.

`lightpath.lenses`
- `SphericalLens(origin, radius, refractive_index)` describes a sphere of
  transparent material.

`lightpath.mirror`
- `Mirror(origin, side_a, side_b, reflectance)` describes a parallelogram
  mirror.
- Its properties are `surface_normal` and `transmittance`.

`lightpath.ray`
- `Ray(origin, direction, energy_density, refractive_index=1.0, wavelength=550e-9)`
  is one segment of a light path. Its direction is normalised when the ray is
  created.
- `collide_with_lens(lens)` sets the ray's `end` and `end_t` and returns the
  new rays created at the lens.
  - It returns nothing for rays whose energy density is below
    `MIN_ENERGY_DENSITY` (0.01).
  - A ray that misses the lens, or only touches it, ends after `MAX_T`.
- `collide_with_mirror(mirror)` returns the reflected ray when the ray hits
  inside the mirror's sides.
- `reflect_and_refract(surface_normal, rotation_axis, n2)` splits a ray at its
  end point.
- `end_point()` returns `origin + end_t * direction`.
- `plot_command()` returns one matplotlib `ax.plot(...)` line for the ray, in
  the x–z plane. The line is blue in a medium with index 1 and orange in any
  other medium.
- `make_parallel_rays(direction, first, last, steps, energy_density, n, wavelength)`
  returns `steps` parallel rays. Their start points are evenly spaced from
  `first` towards `last`, and `last` itself is not included.

## What the package does not do

The package has no command-line program and no ready-made scene. It also has
no function that follows spawned rays through a list of lenses or mirrors for
you. You write that loop yourself, as in the example above.

The package does not write a complete plotting script either.
`plot_command` produces only the line for a single ray. Setting up the figure,
axes and display is left to you.