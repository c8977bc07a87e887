"""Vector utilities for the diffuse shading pipeline.

Vectors are Taichi ``vec3`` values. Addition, subtraction and scalar
multiply/divide are the native ``vec3`` operators; this module adds the
named helpers the shading code relies on.

All helpers are Taichi functions and must be called from inside a kernel.
Vectors are double precision regardless of the backend default float type.
"""

import taichi as ti

# Double-precision 3D vector type
vec3 = ti.types.vector(3, ti.f64)


@ti.func
def dot(a: vec3, b: vec3) -> ti.f64:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The scalar a . b.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


@ti.func
def hadamard(a: vec3, b: vec3) -> vec3:
    """Component-wise (Hadamard) product of two vectors.

    Used to modulate a material color by a light color.
    """
    return vec3(a.x * b.x, a.y * b.y, a.z * b.z)


@ti.func
def length_squared(v: vec3) -> ti.f64:
    """Squared Euclidean length of a vector."""
    return dot(v, v)


@ti.func
def length(v: vec3) -> ti.f64:
    """Euclidean length of a vector."""
    return ti.sqrt(dot(v, v))


@ti.func
def normalize(v: vec3) -> vec3:
    """Scale a vector to unit length.

    The zero vector is not guarded: its length is 0, so every component
    becomes NaN (0 / 0) and propagates through later arithmetic.

    Args:
        v: The input vector. Must have non-zero length for a finite result.

    Returns:
        v divided by its Euclidean length.
    """
    return v / length(v)
