"""Lambertian diffuse shading of sphere hits.

For a hit at ray parameter t:

    P = origin + t * direction
    N = normalize(P - center)
    L = normalize(light_position - P)
    d = max(0, dot(N, L))
    color = material_color (*) light_color * d

where (*) is the component-wise product. There is no ambient term, no
shadow ray and no distance falloff. Rays that miss return the background.

``shade`` evaluates the fixed default scene (yellow sphere of radius 0.5
at (0, 0, -1), white light, black background). ``shade_sphere`` and
``diffuse_color`` take the scene explicitly. The frame kernel picks the
nearest record with ``nearer_hit`` and colors it with ``shade_hit``.
"""

import taichi as ti

from diffuse_orbit.core.ray import Ray, ray_at
from diffuse_orbit.core.vector import dot, hadamard, normalize, vec3
from diffuse_orbit.geometry.sphere import Sphere, SphereHit, hit_sphere, sphere_normal


@ti.func
def diffuse_color(
    ray: Ray,
    t: ti.f64,
    sphere: Sphere,
    material_color: vec3,
    light_position: vec3,
    light_color: vec3,
) -> vec3:
    """Lambertian color of a sphere hit at ray parameter t.

    Args:
        ray: The ray that hit the sphere.
        t: The ray parameter of the hit (may be negative).
        sphere: The sphere that was hit.
        material_color: Diffuse color of the sphere.
        light_position: World-space position of the point light.
        light_color: Color of the point light.

    Returns:
        material_color (*) light_color scaled by max(0, dot(N, L)).
    """
    hit_point = ray_at(ray, t)
    normal = sphere_normal(sphere, hit_point)
    light_dir = normalize(light_position - hit_point)
    diffuse = ti.max(0.0, dot(normal, light_dir))
    return hadamard(material_color, light_color) * diffuse


@ti.func
def nearer_hit(candidate: SphereHit, best: SphereHit) -> ti.i32:
    """Whether candidate should replace best as the nearest hit.

    A miss never replaces anything. A hit replaces a miss, or a hit with a
    larger t. Negative t values compete like any other. Ties keep best.
    """
    nearer = 0
    if candidate.hit == 1:
        if best.hit == 0 or candidate.t < best.t:
            nearer = 1
    return nearer


@ti.func
def shade_hit(
    ray: Ray,
    rec: SphereHit,
    sphere: Sphere,
    material_color: vec3,
    light_position: vec3,
    light_color: vec3,
    background: vec3,
) -> vec3:
    """Color for an intersection record already computed against sphere.

    Returns:
        The diffuse color at rec.t if rec is a hit, otherwise background.
    """
    color = background
    if rec.hit == 1:
        color = diffuse_color(ray, rec.t, sphere, material_color, light_position, light_color)
    return color


@ti.func
def shade_sphere(
    ray: Ray,
    sphere: Sphere,
    material_color: vec3,
    light_position: vec3,
    light_color: vec3,
    background: vec3,
) -> vec3:
    """Shade a ray against a single sphere.

    Returns:
        The diffuse color of the near hit, or background on a miss.
    """
    rec = hit_sphere(ray, sphere)
    return shade_hit(ray, rec, sphere, material_color, light_position, light_color, background)


@ti.func
def shade(ray: Ray, light_position: vec3) -> vec3:
    """Shade a ray against the default scene.

    Args:
        ray: The camera ray.
        light_position: World-space position of the white point light.

    Returns:
        Yellow scaled by the diffuse term on a hit, black on a miss.
    """
    sphere = Sphere(center=vec3(0.0, 0.0, -1.0), radius=0.5)
    return shade_sphere(
        ray,
        sphere,
        vec3(1.0, 1.0, 0.0),
        light_position,
        vec3(1.0, 1.0, 1.0),
        vec3(0.0, 0.0, 0.0),
    )
