"""Orthogonal transforms between oscillator positions and normal coordinates."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = ["make_dst", "make_dsct", "apply_transform"]


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("the transform size must be at least 1")


def make_dst(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the orthonormal type I discrete sine transform and its inverse."""
    _check_size(n)
    index = np.arange(1, n + 1)
    dst = 2.0 * np.sin(np.pi * np.outer(index, index) / (n + 1)) / np.sqrt(2.0 * (n + 1))
    return dst, dst.T.copy()


def make_dsct(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the real discrete sine-cosine transform and its inverse.

    Row ``j`` of the transform corresponds to wave number ``k``, which runs
    from ``-(n - 1) // 2`` upwards; negative wave numbers use sines and the
    others cosines.
    """
    _check_size(n)
    odd = n % 2 == 1
    rows = np.arange(n)
    k = rows - n // 2 if odd else rows - n // 2 + 1
    if odd:
        doubled = k != 0
    else:
        doubled = (k != 0) & (rows != n - 1)
    norm = np.sqrt(np.where(doubled, 2.0, 1.0) / n)
    phase = 2.0 * np.pi * np.outer(k, np.arange(n)) / n
    basis = np.where((k < 0)[:, None], -np.sin(phase), np.cos(phase))
    dsct = norm[:, None] * basis
    return dsct, dsct.T.copy()


def apply_transform(transform: np.ndarray, x: Sequence[float]) -> np.ndarray:
    """Multiply a vector by a square transform matrix."""
    vector = np.asarray(x, dtype=float)
    matrix = np.asarray(transform, dtype=float)
    n = vector.size
    if matrix.size != n * n:
        raise ValueError("transform size does not match the vector length")
    return matrix.reshape(n, n) @ vector