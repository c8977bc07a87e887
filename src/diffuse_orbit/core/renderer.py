"""Frame renderer: one primary ray per pixel through a fixed viewport.

The camera is a pinhole at the world origin looking down -z with focal
length 1. The viewport is 2 world units tall and ``2 * width / height``
wide, so pixel aspect ratio is preserved.

Pixel (i, j) with j counting up from the bottom maps to

    u = i / (width - 1)
    v = j / (height - 1)
    ray = make_ray(origin, lower_left + u * horizontal + v * vertical - origin)

The returned buffer is stored top row first: buffer row 0 holds
j = height - 1. A width or height of 1 divides by zero in u or v. The
NaN ray is not rejected by the intersection test, and the diffuse term
max(0, NaN) evaluates to 0, so every such pixel comes out black.

Example:
    >>> from diffuse_orbit.core.backend import init_backend
    >>> init_backend("cpu")
    >>> pixels = render_frame(400, 400, light_position=(1.0, 1.0, 0.0))
    >>> pixels.shape
    (400, 400, 3)
"""

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
import taichi as ti

from diffuse_orbit.core.ray import make_ray
from diffuse_orbit.core.shading import nearer_hit, shade_hit
from diffuse_orbit.core.vector import vec3
from diffuse_orbit.geometry.sphere import Sphere, SphereHit, hit_sphere
from diffuse_orbit.scene.scene import Scene, Vector3, default_scene

# Camera constants
VIEWPORT_HEIGHT = 2.0
FOCAL_LENGTH = 1.0
CAMERA_ORIGIN: Vector3 = (0.0, 0.0, 0.0)

# Pixel buffer: (height, width, 3) linear RGB, top row first
PixelBuffer = npt.NDArray[np.float64]


@dataclass
class Viewport:
    """Virtual image plane through which camera rays are cast.

    Attributes:
        origin: Camera position.
        horizontal: Vector spanning the full viewport width.
        vertical: Vector spanning the full viewport height.
        lower_left_corner: World-space lower-left corner of the viewport.
    """

    origin: Vector3
    horizontal: Vector3
    vertical: Vector3
    lower_left_corner: Vector3


def compute_viewport(
    width: int,
    height: int,
    viewport_height: float = VIEWPORT_HEIGHT,
    focal_length: float = FOCAL_LENGTH,
) -> Viewport:
    """Compute viewport geometry for an image size.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        viewport_height: Height of the viewport in world units.
        focal_length: Distance from the camera to the viewport along -z.

    Returns:
        The Viewport for the fixed camera at CAMERA_ORIGIN.
    """
    viewport_width = viewport_height * width / height

    origin = np.array(CAMERA_ORIGIN, dtype=np.float64)
    horizontal = np.array([viewport_width, 0.0, 0.0], dtype=np.float64)
    vertical = np.array([0.0, viewport_height, 0.0], dtype=np.float64)
    lower_left = (
        origin
        - horizontal / 2.0
        - vertical / 2.0
        - np.array([0.0, 0.0, focal_length], dtype=np.float64)
    )

    return Viewport(
        origin=tuple(origin.tolist()),
        horizontal=tuple(horizontal.tolist()),
        vertical=tuple(vertical.tolist()),
        lower_left_corner=tuple(lower_left.tolist()),
    )


@ti.kernel
def _render_kernel(
    pixels: ti.types.ndarray(dtype=ti.f64, ndim=3),
    width: ti.i32,
    height: ti.i32,
    origin: vec3,
    lower_left: vec3,
    horizontal: vec3,
    vertical: vec3,
    centers: ti.types.ndarray(dtype=ti.f64, ndim=2),
    radii: ti.types.ndarray(dtype=ti.f64, ndim=1),
    colors: ti.types.ndarray(dtype=ti.f64, ndim=2),
    num_spheres: ti.i32,
    light_position: vec3,
    light_color: vec3,
    background: vec3,
):
    """Fill the pixel buffer. Parallel over pixels, serial over spheres."""
    for row, i in ti.ndrange(height, width):
        j = height - 1 - row
        u = ti.cast(i, ti.f64) / ti.cast(width - 1, ti.f64)
        v = ti.cast(j, ti.f64) / ti.cast(height - 1, ti.f64)
        ray = make_ray(origin, lower_left + u * horizontal + v * vertical - origin)

        # Nearest near-root hit; the sign of t is not checked
        best = SphereHit(hit=0, t=0.0)
        nearest = 0
        for s in range(num_spheres):
            candidate = Sphere(
                center=vec3(centers[s, 0], centers[s, 1], centers[s, 2]),
                radius=radii[s],
            )
            rec = hit_sphere(ray, candidate)
            if nearer_hit(rec, best) == 1:
                best.hit = rec.hit
                best.t = rec.t
                nearest = s

        # Row 0 always exists; an empty scene is padded and best stays a miss
        sphere = Sphere(
            center=vec3(centers[nearest, 0], centers[nearest, 1], centers[nearest, 2]),
            radius=radii[nearest],
        )
        material = vec3(colors[nearest, 0], colors[nearest, 1], colors[nearest, 2])
        color = shade_hit(ray, best, sphere, material, light_position, light_color, background)

        pixels[row, i, 0] = color.x
        pixels[row, i, 1] = color.y
        pixels[row, i, 2] = color.z


def render_frame(
    width: int,
    height: int,
    light_position: Vector3,
    scene: Scene | None = None,
) -> PixelBuffer:
    """Render one frame of the scene lit from light_position.

    Args:
        width: Image width in pixels (>= 1).
        height: Image height in pixels (>= 1).
        light_position: World-space position of the point light.
        scene: Scene to render. Defaults to ``default_scene()``.

    Returns:
        Array of shape (height, width, 3), dtype float64, top row first.
        Values are linear and unclamped.

    Raises:
        ValueError: If width or height is less than 1.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Image dimensions must be at least 1x1, got {width}x{height}")

    if scene is None:
        scene = default_scene()

    viewport = compute_viewport(width, height)
    centers, radii, colors = scene.to_arrays()
    pixels = np.zeros((height, width, 3), dtype=np.float64)

    _render_kernel(
        pixels,
        width,
        height,
        vec3(*viewport.origin),
        vec3(*viewport.lower_left_corner),
        vec3(*viewport.horizontal),
        vec3(*viewport.vertical),
        centers,
        radii,
        colors,
        len(scene.spheres),
        vec3(*light_position),
        vec3(*scene.light_color),
        vec3(*scene.background),
    )
    return pixels
