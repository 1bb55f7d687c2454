# MIT License (see LICENSE)
"""
Utility functions for scalar vector math and array conversion.

The integrator works on plain floats (one component per field), so these
helpers operate on (x, y) pairs instead of numpy vectors. Array helpers
are used where states are exported for diagnostics and rendering.
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used for state export and for JSON input that arrives as lists.
    """
    return np.array(x, dtype=np.float64)


def norm2(dx: float, dy: float) -> float:
    """Squared magnitude of (dx, dy). Avoids sqrt for performance."""
    return dx * dx + dy * dy


def norm(dx: float, dy: float) -> float:
    """Magnitude (length) of (dx, dy)."""
    return math.sqrt(norm2(dx, dy))


def pair(values, what: str) -> tuple[float, float]:
    """
    Coerce a 2-element sequence to a float pair.

    Raises:
        ValueError: If `values` does not hold exactly two entries.
    """
    arr = f64(values).reshape(-1)
    if arr.shape != (2,):
        raise ValueError(f"{what} must have exactly 2 components, got {list(arr)}")
    return float(arr[0]), float(arr[1])
