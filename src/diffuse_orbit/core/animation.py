"""Animation driver: one frame per step of a light orbiting the scene.

For frame f of N the light sits at

    angle = 2 * pi * f / N
    position = (cos(angle) * r, 1, sin(angle) * r)

so it circles the XZ plane at height 1 and completes exactly one
revolution over the sequence. Frames are rendered and written one at a
time in increasing index order; each depends only on its index.

Example:
    >>> from diffuse_orbit.config import AnimationConfig
    >>> from diffuse_orbit.core.backend import init_backend
    >>> init_backend("cpu")
    >>> results = run_animation(AnimationConfig(width=64, height=64, frame_count=4))
    >>> [r.path.name for r in results]
    ['frame0.ppm', 'frame1.ppm', 'frame2.ppm', 'frame3.ppm']
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Generator
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import numpy.typing as npt

from diffuse_orbit.config import AnimationConfig
from diffuse_orbit.core.renderer import render_frame
from diffuse_orbit.output.export import FrameSink, file_sink
from diffuse_orbit.scene.scene import Scene, Vector3, default_scene

# Height of the light orbit plane
LIGHT_HEIGHT = 1.0


@dataclass
class FrameResult:
    """Outcome of rendering and writing one frame.

    Attributes:
        index: Frame index in [0, frame_count).
        light_position: Light position used for the frame.
        path: Where the sink wrote the frame.
        elapsed: Seconds spent rendering and writing the frame.
    """

    index: int
    light_position: Vector3
    path: Path
    elapsed: float


# Type alias for progress callback
# Callback receives (frame_result, frame_count)
FrameCallback = Callable[[FrameResult, int], None]


def light_position_for_frame(frame: int, frame_count: int, orbit_radius: float) -> Vector3:
    """Compute the light position for a frame.

    Args:
        frame: Frame index.
        frame_count: Total frames in one revolution (> 0).
        orbit_radius: Radius of the orbit in the XZ plane.

    Returns:
        (cos(angle) * orbit_radius, 1, sin(angle) * orbit_radius) with
        angle = 2 * pi * frame / frame_count.
    """
    angle = 2.0 * math.pi * frame / frame_count
    return (math.cos(angle) * orbit_radius, LIGHT_HEIGHT, math.sin(angle) * orbit_radius)


def light_positions(frame_count: int, orbit_radius: float) -> list[Vector3]:
    """Light positions for every frame of the animation, in order."""
    return [light_position_for_frame(f, frame_count, orbit_radius) for f in range(frame_count)]


def render_frames(
    config: AnimationConfig,
    scene: Scene | None = None,
) -> Generator[tuple[int, Vector3, npt.NDArray[np.float64]], None, None]:
    """Render frames lazily without writing them.

    Yields:
        Tuple of (frame_index, light_position, pixels) in frame order.
    """
    config.validate()
    if scene is None:
        scene = default_scene()

    for frame in range(config.frame_count):
        light_position = light_position_for_frame(frame, config.frame_count, config.orbit_radius)
        pixels = render_frame(config.width, config.height, light_position, scene)
        yield frame, light_position, pixels


def run_animation(
    config: AnimationConfig,
    scene: Scene | None = None,
    sink: FrameSink | None = None,
    callback: FrameCallback | None = None,
) -> list[FrameResult]:
    """Render and write every frame of the animation.

    Args:
        config: Image size, frame count, orbit radius and output settings.
        scene: Scene to render. Defaults to ``default_scene()``.
        sink: Receives each finished frame. Defaults to a file sink writing
            ``frame{index}.{ext}`` into ``config.output_dir``.
        callback: Optional function called after each frame is written.
            Receives (frame_result, frame_count).

    Returns:
        One FrameResult per frame, in frame order.

    Raises:
        ValueError: If the configuration is invalid.
        FrameWriteError: If a frame cannot be written. Later frames are not
            rendered.
    """
    if sink is None:
        sink = file_sink(config.output_dir, config.image_format)

    results: list[FrameResult] = []
    start_time = time.perf_counter()
    for frame, light_position, pixels in render_frames(config, scene):
        path = sink(frame, pixels)
        result = FrameResult(
            index=frame,
            light_position=light_position,
            path=Path(path),
            elapsed=time.perf_counter() - start_time,
        )
        results.append(result)

        if callback is not None:
            callback(result, config.frame_count)
        start_time = time.perf_counter()

    return results
