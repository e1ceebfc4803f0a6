import logging

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def reset_hotplate_logger():
    """main() attaches handlers to captured streams; drop them between tests"""
    yield
    logger = logging.getLogger("hotplate")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def input_values():
    """10 x 10 plate with distinct values in every cell"""
    return np.arange(100, dtype=np.float64).reshape(10, 10) * 1.5


@pytest.fixture
def input_file(tmp_path, input_values):
    """Input plate written with mixed spaces and newlines"""
    path = tmp_path / "Inputplate.txt"
    flat = [f"{v:.1f}" for v in input_values.ravel()]
    lines = []
    for start in range(0, len(flat), 7):
        lines.append("  ".join(flat[start:start + 7]))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
