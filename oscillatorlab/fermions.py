"""Coupled fermions built from Jordan-Wigner creation operators.

Fermion operators on ``n`` sites are constructed as dense matrices acting on
the ``2**n`` dimensional occupation space; a quadratic Hamiltonian is then
diagonalised to find its energies and eigenvectors.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

import numpy as np

__all__ = [
    "get_ladder_up",
    "get_strand",
    "get_vacant_state",
    "kron",
    "fourier_transform",
    "get_creation_operators",
    "get_annihilators_from_creators",
    "make_density_vector_matrix",
    "get_hamiltonian",
    "ring_couplings",
    "main",
]


def get_ladder_up() -> np.ndarray:
    """Creation operator of a single fermion mode."""
    return np.array([[0.0, 1.0], [0.0, 0.0]], dtype=complex)


def get_strand() -> np.ndarray:
    """The operator exp(-i pi n) of a single mode, n counting its occupation."""
    return np.array([[-1.0, 0.0], [0.0, 1.0]], dtype=complex)


def get_vacant_state(n_oscillators: int) -> np.ndarray:
    """Return the state with no mode occupied."""
    state = np.zeros(2 ** n_oscillators, dtype=complex)
    state[-1] = 1.0
    return state


def kron(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Kronecker product of two matrices."""
    return np.kron(np.asarray(a), np.asarray(b))


def fourier_transform(matrices: Sequence[np.ndarray]) -> list[np.ndarray]:
    """Unitary discrete Fourier transform of a list of operators."""
    stack = np.asarray(matrices, dtype=complex)
    n = stack.shape[0]
    index = np.arange(n)
    phases = np.exp(-2j * np.pi * np.outer(index, index) / n) / np.sqrt(n)
    transformed = np.tensordot(phases, stack, axes=(1, 0))
    return list(transformed)


def get_creation_operators(n: int) -> list[np.ndarray]:
    """Return the fermion creation operators of ``n`` modes.

    Each spin raising operator is multiplied by the parity string of the
    modes before it, so that the operators anticommute.
    """
    string = np.ones((1, 1), dtype=complex)
    ladder_up = get_ladder_up()
    strand = get_strand()
    creators = []
    for i in range(n):
        identity = np.eye(2 ** (n - i - 1), dtype=complex)
        creators.append(kron(kron(string, ladder_up), identity))
        string = kron(strand, string)
    return creators


def get_annihilators_from_creators(creators: Sequence[np.ndarray]) -> list[np.ndarray]:
    """Return the adjoints of the creation operators."""
    return [creator.conj().T for creator in creators]


def make_density_vector_matrix(n_oscillators: int) -> np.ndarray:
    """Matrix whose row ``m`` gives the occupation of mode ``m`` in each basis state.

    In basis state ``j`` mode ``n - 1 - i`` is occupied when bit ``i`` of
    ``j`` is clear.
    """
    states = np.arange(2 ** n_oscillators)
    rows = [
        ((states & (1 << i)) == 0).astype(float)
        for i in range(n_oscillators)
    ]
    return np.array(rows[::-1]).reshape(n_oscillators, -1)


def get_hamiltonian(
    couplings: np.ndarray, annihilators: Sequence[np.ndarray]
) -> np.ndarray:
    """Return the sum of a_i^dagger couplings[i, j] a_j."""
    coupling_matrix = np.asarray(couplings)
    n_states = annihilators[0].shape[0]
    hamiltonian = np.zeros((n_states, n_states), dtype=complex)
    for (i, j), value in np.ndenumerate(coupling_matrix):
        if value != 0.0:
            hamiltonian += annihilators[i].conj().T @ (value * annihilators[j])
    return hamiltonian


def ring_couplings(n_oscillators: int) -> np.ndarray:
    """Nearest-neighbour couplings on a ring: 2 on the diagonal, -1 beside it."""
    couplings = np.zeros((n_oscillators, n_oscillators))
    for i in range(n_oscillators):
        if i + 1 < n_oscillators:
            couplings[i, i + 1] = -1.0
        couplings[i, i] = 2.0
        if i - 1 >= 0:
            couplings[i, i - 1] = -1.0
    couplings[0, n_oscillators - 1] = -1.0
    couplings[n_oscillators - 1, 0] = -1.0
    return couplings


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the mode occupations of the second lowest energy eigenstate."""
    parser = argparse.ArgumentParser(
        description="Diagonalise a ring of coupled fermions."
    )
    parser.add_argument(
        "oscillators", nargs="?", type=int, default=8,
        help="number of fermion modes (default: 8)",
    )
    args = parser.parse_args(argv)
    if args.oscillators < 2:
        parser.error("at least two modes are needed")
    n = args.oscillators
    couplings = ring_couplings(n)
    density = make_density_vector_matrix(n)
    annihilators = get_annihilators_from_creators(get_creation_operators(n))
    hamiltonian = get_hamiltonian(couplings, annihilators)
    _, vectors = np.linalg.eigh(hamiltonian)
    occupations = density @ np.abs(vectors[:, 1]) ** 2
    for value in occupations:
        print(f"{value:g}")
    return 0