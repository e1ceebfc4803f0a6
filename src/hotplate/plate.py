"""
Plate operations for Jacobi relaxation
Solves: u[i,j] = (u[i-1,j] + u[i,j-1] + u[i,j+1] + u[i+1,j]) / 4 on the interior
"""
import numpy as np

from hotplate.config import HEAT_EPSILON, INITIAL_TEMP, PLATE_SIZE


def _check_plate(plate: np.ndarray, name: str = "plate"):
    """Plates are square 2D arrays with at least one interior cell"""
    if plate.ndim != 2 or plate.shape[0] != plate.shape[1]:
        raise ValueError(f"{name} must be a square 2D array, got shape {plate.shape}")
    if plate.shape[0] < 3:
        raise ValueError(f"{name} must be at least 3 x 3, got shape {plate.shape}")


def _check_pair(first: np.ndarray, second: np.ndarray):
    _check_plate(first, "first plate")
    if first.shape != second.shape:
        raise ValueError(f"Plate shapes differ: {first.shape} vs {second.shape}")


def init_plate(size: int = PLATE_SIZE, initial_temp: float = INITIAL_TEMP) -> np.ndarray:
    """
    Create a plate with hot top and bottom rows

    Rows 0 and size-1 hold initial_temp on columns 1..size-2.
    Corners, side columns and the interior start at zero.
    """
    if size < 3:
        raise ValueError(f"Plate size must be at least 3, got {size}")

    plate = np.zeros((size, size), dtype=np.float64)
    plate[0, 1:-1] = initial_temp
    plate[-1, 1:-1] = initial_temp
    return plate


def update_temps(source: np.ndarray, dest: np.ndarray):
    """
    Apply one relaxation pass from source into dest

    Every interior cell of dest becomes the mean of its four neighbours
    in source. Boundary cells of dest are left as they are, so the caller
    seeds them beforehand.
    """
    _check_pair(source, dest)
    if np.may_share_memory(source, dest):
        raise ValueError("Relaxation needs separate source and destination plates")

    dest[1:-1, 1:-1] = (
        source[:-2, 1:-1] +     # top
        source[1:-1, :-2] +     # left
        source[1:-1, 2:] +      # right
        source[2:, 1:-1]        # bottom
    ) / 4.0


def max_change(old: np.ndarray, new: np.ndarray) -> float:
    """Maximum absolute change over the interior cells"""
    _check_pair(old, new)
    return float(np.max(np.abs(new[1:-1, 1:-1] - old[1:-1, 1:-1])))


def state_changed(old: np.ndarray, new: np.ndarray, epsilon: float = HEAT_EPSILON) -> bool:
    """True if any interior cell moved by more than epsilon"""
    _check_pair(old, new)
    return bool(np.any(np.abs(new[1:-1, 1:-1] - old[1:-1, 1:-1]) > epsilon))


def transfer_values(source: np.ndarray, dest: np.ndarray):
    """Overwrite every cell of dest with source"""
    _check_pair(source, dest)
    np.copyto(dest, source)
