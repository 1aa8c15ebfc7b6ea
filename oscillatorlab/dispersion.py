"""Dispersion relations for a chain of coupled oscillators."""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

__all__ = [
    "BoundaryType",
    "DispersionPreset",
    "frequency_index_and_max",
    "get_omega",
    "omega_array",
]


class BoundaryType(IntEnum):
    """Boundary condition of the oscillator chain."""

    ZERO_ENDPOINTS = 0
    PERIODIC = 1


class DispersionPreset(IntEnum):
    """Preset dispersion relations omega(k)."""

    SINE = 0  # 2*sin((pi/2)*(abs(k)/k_max))
    LINEAR = 1  # pi*(abs(k)/k_max)


def frequency_index_and_max(i: int, n: int, boundary_type: int) -> tuple[int, int]:
    """Return the wave number of mode ``i`` of ``n`` and its maximum."""
    if boundary_type == BoundaryType.PERIODIC:
        k = i - n // 2 if n % 2 else i - n // 2 + 1
        return k, n // 2
    return i + 1, n + 1


def get_omega(i: int, n: int, boundary_type: int, preset: int) -> float:
    """Return the angular frequency of mode ``i`` of ``n``."""
    k, size = frequency_index_and_max(i, n, boundary_type)
    if size == 0:
        return math.nan
    if preset == DispersionPreset.SINE:
        return 2.0 * math.sin(0.5 * math.pi * abs(k) / size)
    return math.pi * abs(k) / size


def omega_array(n: int, boundary_type: int, preset: int) -> np.ndarray:
    """Return the angular frequencies of all ``n`` modes."""
    if n < 1:
        raise ValueError("the number of oscillators must be at least 1")
    return np.array([get_omega(i, n, boundary_type, preset) for i in range(n)])