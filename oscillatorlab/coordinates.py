"""Moving between oscillator positions and normal-mode coordinates."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .dispersion import BoundaryType
from .transforms import make_dsct, make_dst

__all__ = [
    "coord_transforms",
    "normals_to_positions",
    "gaussian_displacement",
    "single_excitation_coefficients",
]

_GAUSSIAN_WIDTH_FRACTION = 0.05


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("the number of oscillators must be at least 1")


def coord_transforms(n: int, boundary_type: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the (positions to normals, normals to positions) matrices.

    A chain fixed at zero at both ends uses the type I discrete sine
    transform; a periodic chain uses the discrete sine-cosine transform.
    """
    _check_size(n)
    if boundary_type == BoundaryType.ZERO_ENDPOINTS:
        return make_dst(n)
    if boundary_type == BoundaryType.PERIODIC:
        return make_dsct(n)
    raise ValueError(f"unknown boundary type: {boundary_type!r}")


def normals_to_positions(
    configs: Sequence[float], normals2positions: np.ndarray
) -> np.ndarray:
    """Transform every sample in ``configs`` from normal to position coordinates.

    ``configs`` holds one sample of ``n`` coordinates per row, or is a flat
    sequence of such samples laid end to end; the result has the same shape.
    """
    matrix = np.asarray(normals2positions, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("the transform must be a square matrix")
    n = matrix.shape[0]
    samples = np.asarray(configs, dtype=float)
    if samples.size % n != 0:
        raise ValueError(
            f"{samples.size} values cannot be split into samples of {n} coordinates"
        )
    rows = samples.reshape(-1, n)
    return (rows @ matrix.T).reshape(samples.shape)


def gaussian_displacement(n: int, center: float, amplitude: float) -> np.ndarray:
    """Return a Gaussian bump of displacements centred on oscillator ``center``.

    The width of the bump is five percent of the length of the chain.
    """
    _check_size(n)
    index = np.arange(n, dtype=float)
    width = n * _GAUSSIAN_WIDTH_FRACTION
    return amplitude * np.exp(-0.5 * ((index - center) / width) ** 2)


def single_excitation_coefficients(n: int, mode: int) -> np.ndarray:
    """Return amplitudes of singly excited normal modes localised at oscillator ``mode``.

    The amplitudes are the sine-transform weights of a displacement of the
    single oscillator ``mode`` of a chain fixed at both ends.
    """
    _check_size(n)
    index = np.arange(1, n + 1, dtype=float)
    return 2.0 * np.sin(np.pi * index * (mode + 1.0) / (n + 1)) / np.sqrt(2.0 * (n + 1))