"""Scene description: spheres, light color and background.

The scene is plain Python data. ``Scene.to_arrays`` packs it into NumPy
arrays in Structure-of-Arrays layout for the frame kernel.

Example:
    >>> scene = default_scene()
    >>> scene.spheres[0].radius
    0.5
    >>> scene.add_sphere(center=(1.0, 0.0, -2.0), radius=0.3, color=(0.2, 0.4, 1.0))
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import numpy.typing as npt

Vector3 = tuple[float, float, float]

# Fixed scene of the default animation
DEFAULT_SPHERE_CENTER: Vector3 = (0.0, 0.0, -1.0)
DEFAULT_SPHERE_RADIUS = 0.5
DEFAULT_SPHERE_COLOR: Vector3 = (1.0, 1.0, 0.0)  # Yellow
DEFAULT_LIGHT_COLOR: Vector3 = (1.0, 1.0, 1.0)  # White
DEFAULT_BACKGROUND: Vector3 = (0.0, 0.0, 0.0)  # Black


def _as_vector3(value: Any, name: str) -> Vector3:
    """Convert a 3-element sequence to a float tuple."""
    try:
        x, y, z = value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must have exactly 3 components, got {value!r}") from exc
    return (float(x), float(y), float(z))


@dataclass
class SceneSphere:
    """A sphere with a diffuse color.

    Attributes:
        center: The center of the sphere.
        radius: The radius of the sphere (>= 0).
        color: Linear RGB diffuse color. Not clamped; values outside [0, 1]
            produce out-of-range output bytes.
    """

    center: Vector3
    radius: float
    color: Vector3

    def __post_init__(self) -> None:
        self.center = _as_vector3(self.center, "center")
        self.color = _as_vector3(self.color, "color")
        self.radius = float(self.radius)
        if self.radius < 0.0:
            raise ValueError(f"Sphere radius must be >= 0, got {self.radius}")


@dataclass
class PointLight:
    """A point light. Only the position varies per frame.

    Attributes:
        position: World-space position of the light.
        color: Linear RGB light color. There is no distance falloff.
    """

    position: Vector3
    color: Vector3 = DEFAULT_LIGHT_COLOR

    def __post_init__(self) -> None:
        self.position = _as_vector3(self.position, "position")
        self.color = _as_vector3(self.color, "color")


@dataclass
class Scene:
    """Spheres plus the light color and background shared by every frame.

    Attributes:
        spheres: Spheres in the scene. May be empty.
        light_color: Color of the orbiting point light.
        background: Color returned for rays that hit nothing.
    """

    spheres: list[SceneSphere] = field(default_factory=list)
    light_color: Vector3 = DEFAULT_LIGHT_COLOR
    background: Vector3 = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        self.light_color = _as_vector3(self.light_color, "light_color")
        self.background = _as_vector3(self.background, "background")

    def add_sphere(self, center: Vector3, radius: float, color: Vector3) -> int:
        """Add a sphere and return its index."""
        self.spheres.append(SceneSphere(center=center, radius=radius, color=color))
        return len(self.spheres) - 1

    def light_at(self, position: Vector3) -> PointLight:
        """Build the point light for one frame."""
        return PointLight(position=position, color=self.light_color)

    def to_arrays(
        self,
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Pack sphere data for the frame kernel.

        Returns:
            Tuple (centers, radii, colors) with shapes (N, 3), (N,), (N, 3)
            and dtype float64. An empty scene yields a single zero row so the
            arrays are never zero-sized; use ``len(scene.spheres)`` as the
            active count.
        """
        count = max(len(self.spheres), 1)
        centers = np.zeros((count, 3), dtype=np.float64)
        radii = np.zeros(count, dtype=np.float64)
        colors = np.zeros((count, 3), dtype=np.float64)
        for i, sphere in enumerate(self.spheres):
            centers[i] = sphere.center
            radii[i] = sphere.radius
            colors[i] = sphere.color
        return centers, radii, colors

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a JSON-compatible dictionary."""
        return {
            "spheres": [
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "color": list(sphere.color),
                }
                for sphere in self.spheres
            ],
            "light_color": list(self.light_color),
            "background": list(self.background),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scene:
        """Load a scene from a dictionary produced by ``to_dict``.

        Raises:
            ValueError: If a sphere entry is missing a field or is invalid.
        """
        spheres = []
        for i, entry in enumerate(data.get("spheres", [])):
            try:
                spheres.append(
                    SceneSphere(
                        center=entry["center"],
                        radius=entry["radius"],
                        color=entry["color"],
                    )
                )
            except KeyError as exc:
                raise ValueError(f"Sphere {i} is missing field {exc.args[0]!r}") from exc
        return cls(
            spheres=spheres,
            light_color=data.get("light_color", DEFAULT_LIGHT_COLOR),
            background=data.get("background", DEFAULT_BACKGROUND),
        )


def default_scene() -> Scene:
    """Create the single yellow sphere scene lit by a white light."""
    scene = Scene()
    scene.add_sphere(
        center=DEFAULT_SPHERE_CENTER,
        radius=DEFAULT_SPHERE_RADIUS,
        color=DEFAULT_SPHERE_COLOR,
    )
    return scene
