"""Sphere primitive with near-root ray-sphere intersection.

The intersection substitutes the ray equation into the implicit sphere
equation |P - center|^2 = radius^2 and solves the quadratic

    a*t^2 + b*t + c = 0

with

    oc = ray.origin - center
    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2

Only the near root (-b - sqrt(b^2 - 4ac)) / 2a is reported. Its sign is
not checked, so a sphere behind the ray origin still counts as a hit with
negative t, and a ray starting inside the sphere reports the root behind
it rather than the far wall.

Example:
    >>> sphere = Sphere(center=vec3(0.0, 0.0, -1.0), radius=0.5)
    >>> # Inside a kernel: rec = hit_sphere(ray, sphere); rec.hit, rec.t
"""

import taichi as ti

from diffuse_orbit.core.ray import Ray
from diffuse_orbit.core.vector import dot, normalize, vec3


@ti.dataclass
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (non-negative).
    """

    center: vec3
    radius: ti.f64


@ti.dataclass
class SphereHit:
    """Result of a ray-sphere intersection test.

    Attributes:
        hit: 1 if the discriminant is non-negative, 0 otherwise.
        t: Ray parameter of the near root. Only meaningful if hit == 1.
    """

    hit: ti.i32
    t: ti.f64


@ti.func
def hit_sphere(ray: Ray, sphere: Sphere) -> SphereHit:
    """Intersect a ray with a sphere, returning the near root.

    A NaN discriminant (from a NaN ray) is not rejected: only a strictly
    negative discriminant is a miss.

    Args:
        ray: The ray to test. Its direction need not be unit length.
        sphere: The sphere to test against.

    Returns:
        A SphereHit. ``hit`` is 0 when the discriminant is negative.
    """
    oc = ray.origin - sphere.center
    a = dot(ray.direction, ray.direction)
    b = 2.0 * dot(oc, ray.direction)
    c = dot(oc, oc) - sphere.radius * sphere.radius
    discriminant = b * b - 4.0 * a * c

    # Taichi requires outer-scope declaration
    did_hit = 1
    t = 0.0

    if discriminant < 0.0:
        did_hit = 0
    else:
        t = (-b - ti.sqrt(discriminant)) / (2.0 * a)

    return SphereHit(hit=did_hit, t=t)


@ti.func
def sphere_normal(sphere: Sphere, point: vec3) -> vec3:
    """Outward unit normal of the sphere at a surface point."""
    return normalize(point - sphere.center)


@ti.func
def make_sphere(center: vec3, radius: ti.f64) -> Sphere:
    """Create a sphere from center and radius inside a kernel."""
    return Sphere(center=center, radius=radius)
