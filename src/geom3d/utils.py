from __future__ import annotations
from typing import Iterable
import numpy as np
from numpy.typing import ArrayLike

# absolute per-component tolerance used for near-equality of points
ZERO_TOLERANCE = 1e-08


def unitize(array: ArrayLike, axis=-1, nan=0.0) -> np.ndarray:
    """Unitize an array along an axis. NaNs are replaced with `nan` which defaults to 0.0."""
    array = np.asanyarray(array, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        unit = array / np.linalg.norm(array, axis=axis, keepdims=True)
    unit[np.isnan(unit)] = nan
    return unit


def as_points(coords: ArrayLike | Iterable[float], dim: int = 3) -> np.ndarray:
    """Reshape a raw coordinate collection into an (n, dim) float array.

    Accepts either a flat sequence ``[x0, y0, z0, x1, ...]`` or anything already
    shaped ``(n, dim)``.
    """
    a = np.asarray(list(coords) if not hasattr(coords, "__len__") else coords, dtype=float)
    if a.size == 0:
        return a.reshape(0, dim)
    if a.ndim == 1:
        if a.size % dim:
            raise ValueError(f"Flat coordinate count must be a multiple of {dim}, got {a.size}")
        return a.reshape(-1, dim)
    if a.ndim != 2 or a.shape[1] != dim:
        raise ValueError(f"Coordinates must have shape (n, {dim}), got {a.shape}")
    return a
