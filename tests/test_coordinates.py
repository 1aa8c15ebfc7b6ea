import numpy as np
import pytest

from oscillatorlab.coordinates import (
    coord_transforms,
    gaussian_displacement,
    normals_to_positions,
    single_excitation_coefficients,
)
from oscillatorlab.dispersion import BoundaryType
from oscillatorlab.transforms import make_dsct, make_dst


@pytest.mark.parametrize("n", [1, 4, 7, 16])
@pytest.mark.parametrize("boundary", [BoundaryType.ZERO_ENDPOINTS, BoundaryType.PERIODIC])
def test_coord_transforms_are_mutually_inverse(n, boundary):
    forward, backward = coord_transforms(n, boundary)
    assert forward.shape == (n, n)
    assert np.allclose(backward @ forward, np.eye(n))
    assert np.allclose(backward, forward.T)


def test_coord_transforms_pick_transform_by_boundary():
    assert np.allclose(coord_transforms(6, BoundaryType.ZERO_ENDPOINTS)[0], make_dst(6)[0])
    assert np.allclose(coord_transforms(6, BoundaryType.PERIODIC)[0], make_dsct(6)[0])


def test_coord_transforms_rejects_unknown_boundary():
    with pytest.raises(ValueError):
        coord_transforms(4, 7)


def test_coord_transforms_rejects_empty_chain():
    with pytest.raises(ValueError):
        coord_transforms(0, BoundaryType.ZERO_ENDPOINTS)


def test_normals_to_positions_round_trip_rows():
    n = 5
    forward, backward = coord_transforms(n, BoundaryType.PERIODIC)
    rng = np.random.default_rng(3)
    positions = rng.normal(size=(4, n))
    normals = normals_to_positions(positions, forward)
    back = normals_to_positions(normals, backward)
    assert back.shape == positions.shape
    assert np.allclose(back, positions)


def test_normals_to_positions_flat_matches_rows():
    n = 3
    _, backward = coord_transforms(n, BoundaryType.ZERO_ENDPOINTS)
    rows = np.arange(12, dtype=float).reshape(4, n)
    flat = normals_to_positions(rows.ravel(), backward)
    assert flat.shape == (12,)
    assert np.allclose(flat.reshape(4, n), normals_to_positions(rows, backward))


def test_normals_to_positions_preserves_norm():
    n = 8
    _, backward = coord_transforms(n, BoundaryType.ZERO_ENDPOINTS)
    sample = np.linspace(-1.0, 2.0, n)
    result = normals_to_positions(sample, backward)
    assert np.isclose(np.linalg.norm(result), np.linalg.norm(sample))


def test_normals_to_positions_rejects_bad_length():
    _, backward = coord_transforms(4, BoundaryType.ZERO_ENDPOINTS)
    with pytest.raises(ValueError):
        normals_to_positions(np.zeros(6), backward)


def test_normals_to_positions_rejects_non_square():
    with pytest.raises(ValueError):
        normals_to_positions(np.zeros(6), np.zeros((2, 3)))


def test_gaussian_displacement_peak_and_symmetry():
    n = 64
    bump = gaussian_displacement(n, n / 2.0, 10.0)
    assert bump.shape == (n,)
    assert np.isclose(bump[n // 2], 10.0)
    assert np.argmax(bump) == n // 2
    assert np.allclose(bump[n // 2 - 5], bump[n // 2 + 5])


def test_gaussian_displacement_scales_with_amplitude():
    one = gaussian_displacement(20, 7, 1.0)
    negative = gaussian_displacement(20, 7, -10.0)
    assert np.allclose(negative, -10.0 * one)
    assert np.all(one > 0.0)


def test_single_excitation_coefficients_match_dst_column():
    n = 9
    dst, _ = make_dst(n)
    for mode in (0, 4, 8):
        assert np.allclose(single_excitation_coefficients(n, mode), dst[:, mode])


def test_single_excitation_coefficients_are_normalised():
    coefficients = single_excitation_coefficients(32, 10)
    assert np.isclose(np.sum(coefficients ** 2), 1.0)


def test_single_excitation_coefficients_reject_empty_chain():
    with pytest.raises(ValueError):
        single_excitation_coefficients(0, 0)