# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Vectors are numpy float64 arrays of shape (2,). Screen coordinates are used
throughout: x grows to the right and y grows downward.
"""
from __future__ import annotations
import math
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(math.hypot(v[0], v[1]))


def is_finite_vec(v: np.ndarray) -> bool:
    """True if every component of v is finite."""
    return bool(np.all(np.isfinite(v)))


def env_flag(name: str, default: bool = False, environ=None) -> bool:
    """Read a boolean flag ("1"/"0") from the environment (or a given mapping)."""
    value = (os.environ if environ is None else environ).get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
