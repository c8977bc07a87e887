"""Parametric ray used for primary camera rays.

A ray is ``origin + t * direction``. The direction is normalised when the
ray is built with ``make_ray``, whatever magnitude the caller supplies.

Example:
    >>> import taichi as ti
    >>> from diffuse_orbit.core.backend import init_backend
    >>> init_backend("cpu")
    >>> @ti.kernel
    ... def unit_z() -> ti.f64:
    ...     ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, -4.0))
    ...     return ray.direction.z
    >>> unit_z()
    -1.0
"""

import taichi as ti

from diffuse_orbit.core.vector import normalize, vec3


@ti.dataclass
class Ray:
    """A ray with an origin point and a unit direction.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction of the ray (vec3). Unit length when the ray
            comes from ``make_ray``.
    """

    origin: vec3
    direction: vec3


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    """Create a ray, normalising the direction.

    Args:
        origin: The starting point of the ray.
        direction: Any non-zero direction vector. A zero vector yields a NaN
            direction.

    Returns:
        A Ray whose direction is ``normalize(direction)``.
    """
    return Ray(origin=origin, direction=normalize(direction))


@ti.func
def ray_at(ray: Ray, t: ti.f64) -> vec3:
    """Compute the point along the ray at parameter t.

    Negative t gives points behind the origin.
    """
    return ray.origin + t * ray.direction
