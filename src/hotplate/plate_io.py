"""
Plate presentation and file exchange
Text rendering, CSV export and whitespace-separated plate input
"""
import logging
import sys
from typing import Optional, TextIO

import numpy as np

from hotplate.config import (
    INPUT_PATH,
    OUTPUT_PATH,
    OUTPUT_PRECISION,
    OUTPUT_WIDTH,
    PLATE_SIZE,
)

logger = logging.getLogger(__name__)


class PlateIOError(Exception):
    """A plate file could not be opened, written or read"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PlateFormatError(PlateIOError):
    """A plate file holds too few or non-numeric values"""


def format_plate(plate: np.ndarray,
                 precision: int = OUTPUT_PRECISION,
                 width: int = OUTPUT_WIDTH) -> str:
    """
    Render a plate as comma separated text

    One line per row, each cell fixed-point with `precision` decimals and
    right-justified to `width` characters. No trailing comma.
    """
    return "".join(
        ",".join(f"{value:>{width}.{precision}f}" for value in row) + "\n"
        for row in plate
    )


def output_plate(plate: np.ndarray,
                 stream: Optional[TextIO] = None,
                 precision: int = OUTPUT_PRECISION,
                 width: int = OUTPUT_WIDTH):
    """Write a plate to a stream, stdout by default"""
    if stream is None:
        stream = sys.stdout
    stream.write(format_plate(plate, precision, width))


def export_plate(plate: np.ndarray,
                 path: str = OUTPUT_PATH,
                 precision: int = OUTPUT_PRECISION,
                 width: int = OUTPUT_WIDTH):
    """Write a plate to a CSV file, replacing any previous content"""
    try:
        with open(path, "w", encoding="utf-8") as f:
            output_plate(plate, f, precision, width)
    except OSError as err:
        logger.error(f"Could not write plate to {path}: {err}")
        raise PlateIOError(f"Could not open file {path}", path) from err

    logger.info(f"Saved plate to {path}")


def load_plate(path: str = INPUT_PATH, size: int = PLATE_SIZE) -> np.ndarray:
    """
    Read a size x size plate from a text file

    Values are whitespace separated (spaces and newlines are interchangeable)
    and filled in row-major order. Values past the first size * size are
    ignored.

    Raises:
        PlateIOError: the file cannot be opened or read
        PlateFormatError: the file is not UTF-8 text, a token is not a number
            or there are too few tokens
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            tokens = f.read().split()
    except OSError as err:
        logger.error(f"Could not read plate from {path}: {err}")
        raise PlateIOError(f"Could not open file {path}", path) from err
    except UnicodeDecodeError as err:
        logger.error(f"Plate file {path} is not valid UTF-8 text: {err}")
        raise PlateFormatError(f"{path} is not a UTF-8 text file", path) from err

    n_cells = size * size
    if len(tokens) < n_cells:
        raise PlateFormatError(
            f"{path} holds {len(tokens)} values, expected {n_cells} for a {size} x {size} plate",
            path,
        )
    if len(tokens) > n_cells:
        logger.warning(f"{path} holds {len(tokens)} values, ignoring the last {len(tokens) - n_cells}")

    try:
        values = np.array([float(token) for token in tokens[:n_cells]], dtype=np.float64)
    except ValueError as err:
        raise PlateFormatError(f"{path} holds a non-numeric value: {err}", path) from err

    logger.info(f"Loaded {size} x {size} plate from {path}")
    return values.reshape(size, size)
