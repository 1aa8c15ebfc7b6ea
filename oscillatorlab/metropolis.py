"""Metropolis sampling of an unnormalised probability distribution."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

__all__ = ["MetropolisResult", "metropolis"]

RandomSource = Union[None, int, np.random.Generator]


@dataclass
class MetropolisResult:
    """Samples drawn by :func:`metropolis` and the tallies of the run.

    ``configs`` has one row per step; each row is the state held at the
    start of that step.  The accepted count starts at one, counting the
    initial state as accepted.
    """

    configs: np.ndarray
    accepted_count: int
    rejection_count: int

    def acceptance_rate(self) -> float:
        """Fraction of moves accepted, including the initial state."""
        return self.accepted_count / (self.accepted_count + self.rejection_count)


def metropolis(
    x0: Sequence[float],
    delta: Sequence[float],
    dist_func: Callable[[np.ndarray], float],
    steps: int,
    rng: RandomSource = None,
) -> MetropolisResult:
    """Draw ``steps`` samples from ``dist_func`` starting at ``x0``.

    Each proposal moves every coordinate ``k`` by a uniform amount in
    ``[-delta[k]/2, delta[k]/2)``.  A proposal is accepted when its
    probability is at least the current one, or otherwise with probability
    equal to the ratio of the two.
    """
    x_curr = np.array(x0, dtype=float)
    step_sizes = np.asarray(delta, dtype=float)
    if x_curr.ndim != 1:
        raise ValueError("x0 must be one-dimensional")
    if step_sizes.shape != x_curr.shape:
        raise ValueError("delta must have the same length as x0")
    if steps < 0:
        raise ValueError("steps must not be negative")
    generator = np.random.default_rng(rng)

    configs = np.empty((steps, x_curr.size), dtype=float)
    prob_curr = float(dist_func(x_curr.copy()))
    accepted_count = 1
    rejection_count = 0
    for row in configs:
        row[:] = x_curr
        x_next = x_curr + step_sizes * (generator.random(x_curr.size) - 0.5)
        prob_next = float(dist_func(x_next.copy()))
        if prob_next >= prob_curr or generator.random() <= _ratio(prob_next, prob_curr):
            prob_curr = prob_next
            x_curr = x_next
            accepted_count += 1
        else:
            rejection_count += 1
    return MetropolisResult(configs, accepted_count, rejection_count)


def _ratio(numerator: float, denominator: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))