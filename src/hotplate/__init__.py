"""
Hotplate steady-state heat diffusion simulator
Jacobi relaxation on a square plate with fixed boundaries
"""
from hotplate.config import PlateConfig
from hotplate.plate import (
    init_plate,
    update_temps,
    state_changed,
    max_change,
    transfer_values,
)
from hotplate.plate_io import (
    PlateIOError,
    PlateFormatError,
    format_plate,
    output_plate,
    export_plate,
    load_plate,
)
from hotplate.solver import HotplateSolver, SolverResult, SolverState

__version__ = "0.1.0"

__all__ = [
    "PlateConfig",
    "init_plate",
    "update_temps",
    "state_changed",
    "max_change",
    "transfer_values",
    "PlateIOError",
    "PlateFormatError",
    "format_plate",
    "output_plate",
    "export_plate",
    "load_plate",
    "HotplateSolver",
    "SolverResult",
    "SolverState",
]
