"""Coupled oscillators: Metropolis sampling, normal-mode transforms, dispersion relations, PNG output and fermion operators."""

__version__ = "0.1.0"

__all__ = [
    "coordinates",
    "dispersion",
    "fermions",
    "metropolis",
    "png",
    "transforms",
]