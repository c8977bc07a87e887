"""Frame export: PPM (P3) text images and PNG via Pillow.

Channel quantization is ``floor(255.999 * c)`` with no clamping, so a
component of exactly 1.0 maps to 255 and values outside [0, 1] produce
out-of-range integers in the PPM output. PNG cannot store such values and
clips them to [0, 255] after quantization.

A P3 file is:

    P3
    <width> <height>
    255
    R G B        (one line per pixel, rows top to bottom)

Example:
    >>> from diffuse_orbit.output.export import frame_filename, write_frame
    >>> frame_filename(7)
    'frame7.ppm'
    >>> write_frame(pixels, "frame7.ppm")
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Literal

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

# Type alias for supported output formats
ImageFormat = Literal["ppm", "png"]
IMAGE_FORMATS: tuple[str, ...] = ("ppm", "png")

# Named output sink: receives (frame_index, pixels) and returns the written path
FrameSink = Callable[[int, npt.NDArray[np.float64]], Path]

# Just under 256 so that 1.0 quantizes to 255
QUANTIZE_SCALE = 255.999
MAX_CHANNEL_VALUE = 255


class FrameWriteError(OSError):
    """Raised when a frame cannot be written to its output path."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write frame to {self.path}: {reason}")


def frame_filename(index: int, ext: str = "ppm") -> str:
    """Return the file name for a frame: ``frame{index}.{ext}``, no padding."""
    return f"frame{index}.{ext}"


def quantize(pixels: npt.NDArray[np.floating]) -> npt.NDArray[np.int64]:
    """Convert linear colors to integer channel values.

    Args:
        pixels: Array of linear color components, any shape.

    Returns:
        ``floor(255.999 * pixels)`` as int64. Not clamped. NaN components
        become arbitrary integers rather than raising.
    """
    with np.errstate(invalid="ignore"):
        return np.floor(QUANTIZE_SCALE * np.asarray(pixels, dtype=np.float64)).astype(np.int64)


def format_ppm(pixels: npt.NDArray[np.floating]) -> str:
    """Format a pixel buffer as P3 text.

    Args:
        pixels: Array of shape (height, width, 3), top row first.

    Returns:
        The complete file contents, ending with a newline.

    Raises:
        ValueError: If pixels is not a (height, width, 3) array.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) pixel buffer, got shape {pixels.shape}")

    height, width, _ = pixels.shape
    values = quantize(pixels).reshape(-1, 3)

    lines = ["P3", f"{width} {height}", str(MAX_CHANNEL_VALUE)]
    lines.extend(f"{r} {g} {b}" for r, g, b in values.tolist())
    return "\n".join(lines) + "\n"


def write_ppm(pixels: npt.NDArray[np.floating], path: str | Path) -> Path:
    """Write a pixel buffer as a P3 PPM file.

    Raises:
        FrameWriteError: If the file cannot be written.
    """
    output = Path(path)
    text = format_ppm(pixels)
    try:
        output.write_text(text, encoding="ascii")
    except OSError as exc:
        raise FrameWriteError(output, exc.strerror or str(exc)) from exc
    return output


def write_png(pixels: npt.NDArray[np.floating], path: str | Path) -> Path:
    """Write a pixel buffer as an 8-bit RGB PNG.

    Uses the same quantization as PPM, then clips to [0, 255].

    Raises:
        FrameWriteError: If the file cannot be written.
    """
    output = Path(path)
    image_uint8 = np.clip(quantize(pixels), 0, MAX_CHANNEL_VALUE).astype(np.uint8)
    pil_image = PILImage.fromarray(image_uint8)
    try:
        pil_image.save(output, format="PNG")
    except OSError as exc:
        raise FrameWriteError(output, exc.strerror or str(exc)) from exc
    return output


def write_frame(
    pixels: npt.NDArray[np.floating],
    path: str | Path,
    image_format: ImageFormat = "ppm",
) -> Path:
    """Write a pixel buffer in the requested format.

    Raises:
        ValueError: If image_format is not supported.
        FrameWriteError: If the file cannot be written.
    """
    if image_format == "ppm":
        return write_ppm(pixels, path)
    if image_format == "png":
        return write_png(pixels, path)
    raise ValueError(f"Unknown image format {image_format!r}, expected one of {IMAGE_FORMATS}")


def file_sink(output_dir: str | Path = ".", image_format: ImageFormat = "ppm") -> FrameSink:
    """Build a sink that writes each frame to ``output_dir/frame{index}.{ext}``.

    The directory is created on the first write if it does not exist.
    """
    directory = Path(output_dir)

    def sink(index: int, pixels: npt.NDArray[np.float64]) -> Path:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FrameWriteError(directory, exc.strerror or str(exc)) from exc
        return write_frame(pixels, directory / frame_filename(index, image_format), image_format)

    return sink
