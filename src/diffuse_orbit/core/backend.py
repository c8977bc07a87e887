"""Taichi backend initialisation.

Rendering runs in double precision so pixel values match a plain
floating-point implementation of the same formulas.
"""

import taichi as ti
from taichi.lang import impl

# Architectures accepted by init_backend
SUPPORTED_ARCHS = ("cpu", "gpu")


def init_backend(arch: str = "cpu") -> str:
    """Initialise Taichi with 64-bit floats.

    Must be called once, before any kernel from this package runs.

    Args:
        arch: ``"cpu"`` or ``"gpu"``. Taichi falls back to the CPU when no
            GPU backend is available.

    Returns:
        The architecture actually in use, ``"cpu"`` or ``"gpu"``.

    Raises:
        ValueError: If arch is not one of SUPPORTED_ARCHS.
    """
    if arch not in SUPPORTED_ARCHS:
        raise ValueError(f"Unsupported arch {arch!r}, expected one of {SUPPORTED_ARCHS}")

    ti.init(arch=ti.gpu if arch == "gpu" else ti.cpu, default_fp=ti.f64)
    return "cpu" if impl.current_cfg().arch == ti.cpu else "gpu"
