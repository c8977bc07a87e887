"""Output module for writing rendered frames.

Components:
    export: PPM (P3) and PNG writers, channel quantization, frame naming
        and the file sink used by the animation driver

Write failures raise FrameWriteError naming the path.
"""

from diffuse_orbit.output.export import (
    IMAGE_FORMATS,
    FrameSink,
    FrameWriteError,
    ImageFormat,
    file_sink,
    format_ppm,
    frame_filename,
    quantize,
    write_frame,
    write_png,
    write_ppm,
)

__all__ = [
    "FrameSink",
    "FrameWriteError",
    "ImageFormat",
    "IMAGE_FORMATS",
    "file_sink",
    "format_ppm",
    "frame_filename",
    "quantize",
    "write_frame",
    "write_png",
    "write_ppm",
]
