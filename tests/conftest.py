"""Pytest configuration for diffuse_orbit tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields created by earlier tests.
    """
    from diffuse_orbit.core.backend import init_backend

    init_backend("cpu")
    yield


@pytest.fixture
def memory_sink():
    """A frame sink that keeps frames in memory instead of writing files."""
    from pathlib import Path

    frames = {}

    def sink(index, pixels):
        frames[index] = pixels.copy()
        return Path(f"memory/frame{index}.ppm")

    sink.frames = frames
    return sink
