import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from hotplate.plate import (
    init_plate,
    max_change,
    state_changed,
    transfer_values,
    update_temps,
)


@pytest.mark.parametrize("size", [3, 4, 10, 17])
@pytest.mark.parametrize("temp", [100.0, 37.5])
def test_init_plate_pattern(size, temp):
    plate = init_plate(size, temp)

    assert plate.shape == (size, size)
    assert plate.dtype == np.float64
    for i in range(size):
        for j in range(size):
            hot_row = i in (0, size - 1)
            inner_col = 0 < j < size - 1
            expected = temp if hot_row and inner_col else 0.0
            assert plate[i, j] == expected


def test_init_plate_defaults():
    plate = init_plate()
    assert plate.shape == (10, 10)
    assert plate[0, 5] == 100.0
    assert plate[0, 0] == 0.0
    assert plate[9, 9] == 0.0


def test_init_plate_too_small():
    with pytest.raises(ValueError):
        init_plate(2)


def test_first_pass_values():
    source = init_plate(10, 100.0)
    dest = init_plate(10, 100.0)
    update_temps(source, dest)

    # Top neighbour is 100, the others are 0
    assert dest[1, 1] == pytest.approx(25.0)
    assert dest[1, 5] == pytest.approx(25.0)
    assert dest[8, 8] == pytest.approx(25.0)
    assert dest[5, 5] == 0.0
    assert dest[2, 1] == 0.0
    assert_array_equal(source, init_plate(10, 100.0))


def test_update_leaves_boundary_alone():
    source = np.random.default_rng(1).uniform(0.0, 100.0, (6, 6))
    dest = np.full((6, 6), -1.0)
    update_temps(source, dest)

    assert np.all(dest[0, :] == -1.0)
    assert np.all(dest[-1, :] == -1.0)
    assert np.all(dest[:, 0] == -1.0)
    assert np.all(dest[:, -1] == -1.0)
    assert np.all(dest[1:-1, 1:-1] != -1.0)


def test_update_matches_neighbour_mean():
    source = np.random.default_rng(7).uniform(-50.0, 50.0, (5, 5))
    dest = source.copy()
    update_temps(source, dest)

    for i in range(1, 4):
        for j in range(1, 4):
            expected = (source[i - 1, j] + source[i, j - 1] + source[i, j + 1] + source[i + 1, j]) / 4
            assert dest[i, j] == pytest.approx(expected)


def test_update_is_idempotent_on_equilibrium():
    # A linear field equals the mean of its neighbours everywhere
    rows, cols = np.indices((8, 8), dtype=np.float64)
    plate = 3.0 * rows - 2.0 * cols + 10.0
    dest = plate.copy()
    dest[1:-1, 1:-1] = 0.0

    update_temps(plate, dest)
    assert_allclose(dest, plate)

    again = dest.copy()
    update_temps(dest, again)
    assert_allclose(again, plate)


def test_update_rejects_same_array():
    plate = init_plate(5)
    with pytest.raises(ValueError):
        update_temps(plate, plate)


@pytest.mark.parametrize("shape_a, shape_b", [
    ((5, 5), (6, 6)),
    ((5, 6), (5, 6)),
    ((2, 2), (2, 2)),
])
def test_shape_checks(shape_a, shape_b):
    with pytest.raises(ValueError):
        update_temps(np.zeros(shape_a), np.zeros(shape_b))
    with pytest.raises(ValueError):
        state_changed(np.zeros(shape_a), np.zeros(shape_b))
    with pytest.raises(ValueError):
        transfer_values(np.zeros(shape_a), np.zeros(shape_b))


def test_state_changed_threshold_is_inclusive():
    old = np.zeros((10, 10))
    new = old.copy()
    new[4, 4] = 0.5

    assert not state_changed(old, new, 0.5)
    new[4, 4] = 0.5 + 1e-9
    assert state_changed(old, new, 0.5)


def test_state_changed_negative_delta():
    old = np.full((10, 10), 2.0)
    new = old.copy()
    new[8, 1] = 1.75

    assert state_changed(old, new, 0.2)
    assert not state_changed(old, new, 0.25)


def test_state_changed_ignores_boundary():
    old = init_plate(10)
    new = old.copy()
    new[0, :] = 1000.0
    new[:, -1] = -1000.0

    assert not state_changed(old, new)


def test_state_changed_default_epsilon():
    old = np.zeros((10, 10))
    new = old.copy()
    new[5, 5] = 0.1
    assert not state_changed(old, new)
    new[5, 5] = 0.11
    assert state_changed(old, new)


def test_max_change():
    old = np.zeros((6, 6))
    new = old.copy()
    new[2, 3] = -4.0
    new[1, 1] = 3.0
    new[0, 0] = 99.0

    assert max_change(old, new) == 4.0
    assert max_change(old, old) == 0.0


def test_transfer_values():
    source = np.random.default_rng(3).uniform(0.0, 1.0, (10, 10))
    original = source.copy()
    dest = np.zeros((10, 10))

    transfer_values(source, dest)

    assert_array_equal(dest, source)
    assert_array_equal(source, original)
    assert dest is not source
