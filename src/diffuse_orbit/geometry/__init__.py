"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with analytic near-root intersection

Intersection routines are Taichi functions (@ti.func) called from the
frame kernel once per sphere per pixel. There is no acceleration
structure; every sphere is tested for every ray.
"""

from .sphere import Sphere, SphereHit, hit_sphere, make_sphere, sphere_normal

__all__ = [
    "Sphere",
    "SphereHit",
    "hit_sphere",
    "make_sphere",
    "sphere_normal",
]
