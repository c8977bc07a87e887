"""Scene module for scene description.

Components:
    scene: Spheres, point light and background as plain Python data,
        with packing into kernel-ready NumPy arrays

The default scene is one yellow sphere of radius 0.5 at (0, 0, -1) lit by
a white point light on a black background.
"""

from .scene import (
    DEFAULT_BACKGROUND,
    DEFAULT_LIGHT_COLOR,
    DEFAULT_SPHERE_CENTER,
    DEFAULT_SPHERE_COLOR,
    DEFAULT_SPHERE_RADIUS,
    PointLight,
    Scene,
    SceneSphere,
    default_scene,
)

__all__ = [
    "Scene",
    "SceneSphere",
    "PointLight",
    "default_scene",
    "DEFAULT_SPHERE_CENTER",
    "DEFAULT_SPHERE_RADIUS",
    "DEFAULT_SPHERE_COLOR",
    "DEFAULT_LIGHT_COLOR",
    "DEFAULT_BACKGROUND",
]
