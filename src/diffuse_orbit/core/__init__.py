"""Core rendering module.

Components:
    backend: Taichi initialisation in double precision
    vector: Vector helpers (dot, Hadamard product, normalisation)
    ray: Ray data structure with normalised direction
    shading: Lambertian diffuse shading of sphere hits
    renderer: Per-frame pixel loop over a fixed pinhole viewport
    animation: Orbiting-light frame sequence driver

Vector, ray and shading routines are Taichi functions for use inside
kernels. The renderer launches one kernel per frame.
"""

from .backend import init_backend
from .ray import Ray, make_ray, ray_at
from .vector import dot, hadamard, length, length_squared, normalize, vec3

# Note: shading, renderer and animation are NOT imported here to avoid
# circular imports with the geometry and scene packages. Import them from
# their modules directly.

__all__ = [
    "init_backend",
    "Ray",
    "make_ray",
    "ray_at",
    "vec3",
    "dot",
    "hadamard",
    "length",
    "length_squared",
    "normalize",
]
