"""Animated diffuse shading of a sphere lit by an orbiting point light.

One primary ray per pixel, analytic ray-sphere intersection and a
Lambertian diffuse term, evaluated in Taichi kernels in double precision.
There are no reflections, shadows or anti-aliasing.

Subpackages:
    core: Vector helpers, rays, shading, the frame renderer and animation driver
    geometry: Sphere primitive and intersection
    scene: Scene description (spheres, light color, background)
    output: PPM/PNG frame writers

Call ``diffuse_orbit.core.init_backend()`` before rendering.
"""

__version__ = "0.1.0"
