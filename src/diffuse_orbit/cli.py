"""Render the orbiting-light sphere animation.

Renders a yellow sphere lit by a white point light that circles it once
over the sequence, writing one image per frame.

Usage:
    diffuse-orbit [options]
    python -m diffuse_orbit.cli [options]

Options:
    --width WIDTH             Image width in pixels (default: 400)
    --height HEIGHT           Image height in pixels (default: 400)
    --frames FRAMES           Number of frames (default: 60)
    --orbit-radius RADIUS     Light orbit radius (default: 1.0)
    --output-dir DIR          Directory for frame files (default: .)
    --format {ppm,png}        Output image format (default: ppm)
    --arch {cpu,gpu}          Taichi backend (default: cpu)
    --quiet                   Suppress progress output

Example:
    diffuse-orbit --width 200 --height 200 --frames 30 --output-dir frames
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from diffuse_orbit.config import (
    DEFAULT_FRAME_COUNT,
    DEFAULT_HEIGHT,
    DEFAULT_ORBIT_RADIUS,
    DEFAULT_WIDTH,
    AnimationConfig,
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere lit by an orbiting point light.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Image width in pixels (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Image height in pixels (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=DEFAULT_FRAME_COUNT,
        help=f"Number of frames (default: {DEFAULT_FRAME_COUNT})",
    )
    parser.add_argument(
        "--orbit-radius",
        type=float,
        default=DEFAULT_ORBIT_RADIUS,
        help=f"Light orbit radius (default: {DEFAULT_ORBIT_RADIUS})",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for frame files (default: .)",
    )
    parser.add_argument(
        "--format",
        choices=["ppm", "png"],
        default="ppm",
        help="Output image format (default: ppm)",
    )
    parser.add_argument(
        "--arch",
        choices=["cpu", "gpu"],
        default="cpu",
        help="Taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AnimationConfig:
    """Build and validate an AnimationConfig from parsed arguments."""
    config = AnimationConfig(
        width=args.width,
        height=args.height,
        frame_count=args.frames,
        orbit_radius=args.orbit_radius,
        output_dir=args.output_dir,
        image_format=args.format,
        arch=args.arch,
    )
    config.validate()
    return config


def render_animation(config: AnimationConfig, quiet: bool = False) -> int:
    """Render every frame and report timing.

    Returns:
        Number of frames written.
    """
    # Deferred so parse_args and build_config work without loading the renderer
    from diffuse_orbit.core.animation import FrameResult, run_animation

    if not quiet:
        print(
            f"Rendering {config.frame_count} frames "
            f"({config.width}x{config.height}) to {config.output_dir}..."
        )

    start_time = time.perf_counter()

    def progress_callback(result: FrameResult, frame_count: int) -> None:
        if not quiet:
            print(f"Frame {result.index} rendered in {result.elapsed} seconds.")

    results = run_animation(config, callback=progress_callback)

    if not quiet:
        print(f"Total time: {time.perf_counter() - start_time:.2f}s")

    return len(results)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    from diffuse_orbit.core.backend import init_backend

    arch = init_backend(config.arch)
    if not args.quiet:
        print(f"Using {arch.upper()} backend")

    try:
        render_animation(config, quiet=args.quiet)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
