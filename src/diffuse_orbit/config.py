"""Animation configuration.

The defaults reproduce the reference animation: 60 frames of 400x400
pixels with the light orbiting at radius 1.0, written as PPM files to the
current directory.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from diffuse_orbit.core.backend import SUPPORTED_ARCHS
from diffuse_orbit.output.export import IMAGE_FORMATS

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400
DEFAULT_FRAME_COUNT = 60
DEFAULT_ORBIT_RADIUS = 1.0


@dataclass
class AnimationConfig:
    """Settings for one animation run.

    Attributes:
        width: Image width in pixels. 1 is allowed; the 0/0 column
            coordinate makes every pixel black.
        height: Image height in pixels. 1 is allowed; the 0/0 row
            coordinate makes every pixel black.
        frame_count: Number of frames in one full light revolution.
        orbit_radius: Radius of the light orbit in the XZ plane.
        output_dir: Directory that receives the frame files.
        image_format: "ppm" or "png".
        arch: Taichi backend, "cpu" or "gpu".
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    frame_count: int = DEFAULT_FRAME_COUNT
    orbit_radius: float = DEFAULT_ORBIT_RADIUS
    output_dir: str = "."
    image_format: str = "ppm"
    arch: str = "cpu"

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ValueError: If a dimension is below 1, frame_count is negative,
                or image_format/arch is unknown.
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Image dimensions must be at least 1x1, got {self.width}x{self.height}"
            )
        if self.frame_count < 0:
            raise ValueError(f"frame_count must be >= 0, got {self.frame_count}")
        if self.image_format not in IMAGE_FORMATS:
            raise ValueError(
                f"Unknown image format {self.image_format!r}, expected one of {IMAGE_FORMATS}"
            )
        if self.arch not in SUPPORTED_ARCHS:
            raise ValueError(f"Unsupported arch {self.arch!r}, expected one of {SUPPORTED_ARCHS}")

    def to_dict(self) -> dict[str, Any]:
        """Export the configuration as a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnimationConfig:
        """Build a configuration from a dictionary, ignoring unknown keys.

        Raises:
            ValueError: If the resulting configuration is invalid.
        """
        known = {f.name for f in fields(cls)}
        config = cls(**{key: value for key, value in data.items() if key in known})
        config.validate()
        return config
