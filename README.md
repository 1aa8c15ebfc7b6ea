# oscillatorlab

Numerical tools for chains of coupled quantum harmonic oscillators and for
coupled fermions.

## Modules

- `oscillatorlab.metropolis`: `metropolis(x0, delta, dist_func, steps, rng=None)`
  draws samples from an unnormalised distribution. Each proposal moves
  coordinate `k` by a uniform amount in `[-delta[k]/2, delta[k]/2)`. It
  returns a `MetropolisResult` with `configs` (one row per step),
  `accepted_count`, `rejection_count` and `acceptance_rate()`. The initial
  state counts as one acceptance.
- `oscillatorlab.transforms`: `make_dst(n)` returns the orthonormal type I
  discrete sine transform and its inverse. `make_dsct(n)` does the same for
  the real discrete sine-cosine transform. `apply_transform(transform, x)`
  multiplies a vector by a square transform.
- `oscillatorlab.dispersion`: `BoundaryType` (`ZERO_ENDPOINTS`, `PERIODIC`)
  and `DispersionPreset` (`SINE` for `2*sin((pi/2)*|k|/k_max)`, `LINEAR` for
  `pi*|k|/k_max`). `frequency_index_and_max`, `get_omega` and `omega_array`
  give mode wave numbers and angular frequencies.
- `oscillatorlab.coordinates`: `coord_transforms(n, boundary_type)` returns
  the positions-to-normals and normals-to-positions matrices for a boundary
  type. `normals_to_positions` converts sampled normal coordinates to
  positions. `gaussian_displacement` builds a Gaussian bump whose width is
  5% of the chain. `single_excitation_coefficients` gives the normal-mode
  weights of a single displaced oscillator.
- `oscillatorlab.png`: `encode_rgb8_png(data, width, height)` and
  `write_rgb8_png(path, data, width, height)` write 8-bit RGB pixels as PNG.
  The rows are given bottom row first.
- `oscillatorlab.fermions`: fermion creation operators built with the
  Jordan-Wigner transformation (`get_creation_operators`) and their
  annihilators (`get_annihilators_from_creators`). It also provides
  `kron`, `fourier_transform`, the vacant state (`get_vacant_state`), the
  occupation matrix (`make_density_vector_matrix`), `get_hamiltonian`, and
  nearest-neighbour ring couplings (`ring_couplings`).

## Installation

```
pip install .
```

To run the tests, install with `pip install .[test]` and then run `pytest`.

## Examples

Sample a one-dimensional Gaussian:

```python
import math
import numpy as np
from oscillatorlab.metropolis import metropolis

result = metropolis(
    [0.0], [1.0], lambda x: math.exp(-x[0] ** 2), 1000,
    np.random.default_rng(0),
)
print(result.configs.shape, result.acceptance_rate())
```

Normal-mode frequencies of a periodic chain:

```python
from oscillatorlab.dispersion import BoundaryType, DispersionPreset, omega_array

omega_array(8, BoundaryType.PERIODIC, DispersionPreset.SINE)
```

Convert normal coordinates to positions on a chain with fixed ends:

```python
from oscillatorlab.coordinates import coord_transforms, normals_to_positions

to_normals, to_positions = coord_transforms(16, 0)
positions = normals_to_positions(samples, to_positions)
```

## Command line

```
oscillatorlab-fermions [OSCILLATORS]
```

This builds the hopping Hamiltonian for `OSCILLATORS` fermion modes on a
ring. The default is 8 and at least 2 are needed. It diagonalises the
Hamiltonian and prints, one per line, the mode occupations of the
eigenvector with the second lowest energy.

## What it does not do

The package has no graphical window, rendering or interactive controls. It
computes samples, transforms and frequencies, but it does not draw them.
It includes no wave functions of oscillator states. `metropolis` samples
whatever probability function you pass to it.