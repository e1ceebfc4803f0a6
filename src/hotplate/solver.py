"""
Hotplate relaxation driver
Repeats Jacobi passes until the plate stops changing or the iteration cap is hit
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from hotplate.config import PlateConfig
from hotplate.plate import (
    init_plate,
    max_change,
    state_changed,
    transfer_values,
    update_temps,
)

logger = logging.getLogger(__name__)


class SolverState(enum.Enum):
    INITIAL = "initial"
    ITERATING = "iterating"
    CONVERGED = "converged"
    ITERATION_LIMIT_REACHED = "iteration_limit_reached"
    EXTERNAL_CASE_RUNNING = "external_case_running"
    DONE = "done"


@dataclass
class SolverResult:
    """Outcome of a steady state search"""
    plate: np.ndarray     # Final plate (a copy, safe to keep)
    iterations: int       # Relaxation passes applied, first pass included
    state: SolverState    # CONVERGED or ITERATION_LIMIT_REACHED
    max_change: float     # Largest interior change in the last pass

    @property
    def converged(self) -> bool:
        return self.state is SolverState.CONVERGED


class HotplateSolver:
    """
    Jacobi relaxation solver for a square plate

    This class handles:
    - Plate initialization with fixed hot rows
    - Two-buffer relaxation with buffer swapping
    - Steady state detection against epsilon
    - Fixed-count relaxation of an externally loaded plate
    """
    def __init__(self, config: Optional[PlateConfig] = None, progress_interval: int = 100):
        """
        Initialize the solver

        Args:
            config: Simulation parameters (default: PlateConfig())
            progress_interval: Log progress every N iterations
        """
        self.config = config if config else PlateConfig()
        self.progress_interval = max(1, progress_interval)
        self.iterations = 0
        self.state = SolverState.INITIAL

        # Both buffers share the same boundary, relaxation only writes the interior
        self.u = init_plate(self.config.size, self.config.initial_temp)
        self.u_new = init_plate(self.config.size, self.config.initial_temp)

        logger.debug(f"Solver created: {self.config.size} x {self.config.size} plate, "
                     f"epsilon={self.config.epsilon}, limit={self.config.iteration_limit}")

    @property
    def plate(self) -> np.ndarray:
        """Current plate"""
        return self.u

    def relax(self):
        """One relaxation pass; the new plate becomes current"""
        update_temps(self.u, self.u_new)

        # Swap arrays (u becomes u_new for next iteration)
        self.u, self.u_new = self.u_new, self.u

    def first_iteration(self) -> np.ndarray:
        """Apply the unconditional first pass and return the plate"""
        if self.state is not SolverState.INITIAL:
            raise RuntimeError(f"First iteration already done (state: {self.state.value})")

        self.relax()
        self.iterations = 1
        self.state = SolverState.ITERATING
        return self.u

    def iterate_to_steady_state(self) -> SolverResult:
        """
        Relax until no interior cell changes by more than epsilon

        Stops early at config.iteration_limit passes. The first pass counts
        towards the limit and is applied here if first_iteration() was not
        called yet.
        """
        if self.state is SolverState.INITIAL:
            self.first_iteration()
        elif self.state is not SolverState.ITERATING:
            raise RuntimeError(f"Cannot iterate from state {self.state.value}")

        epsilon = self.config.epsilon
        limit = self.config.iteration_limit
        last_change = 0.0

        steady = False
        # Checked before each pass: iteration_limit=1 stops after the first pass
        while not steady and self.iterations < limit:
            self.relax()
            # After the swap u_new holds the plate from before this pass
            steady = not state_changed(self.u_new, self.u, epsilon)
            last_change = max_change(self.u_new, self.u)
            self.iterations += 1

            if self.iterations % self.progress_interval == 0:
                logger.debug(f"Iteration {self.iterations}: max change {last_change:.6f}")

        if steady:
            self.state = SolverState.CONVERGED
            logger.info(f"Steady state reached after {self.iterations} iterations "
                        f"(max change {last_change:.6f})")
        else:
            self.state = SolverState.ITERATION_LIMIT_REACHED
            logger.warning(f"Iteration limit {limit} reached before steady state "
                           f"(max change {last_change:.6f})")

        return SolverResult(
            plate=self.u.copy(),
            iterations=self.iterations,
            state=self.state,
            max_change=last_change,
        )

    def run_fixed(self, plate: np.ndarray, iterations: Optional[int] = None) -> np.ndarray:
        """
        Relax a given plate a fixed number of times

        No convergence check and no cap. The solver buffers are reseeded
        from the plate, which itself is not modified.
        """
        if iterations is None:
            iterations = self.config.fixed_iterations
        if iterations < 0:
            raise ValueError(f"Iterations must be non-negative, got {iterations}")
        if plate.shape != self.u.shape:
            raise ValueError(f"Plate shape {plate.shape} does not match solver plate {self.u.shape}")

        self.state = SolverState.EXTERNAL_CASE_RUNNING
        transfer_values(plate, self.u)
        transfer_values(plate, self.u_new)

        for _ in range(iterations):
            self.relax()

        logger.info(f"Applied {iterations} relaxation passes to the loaded plate")
        self.state = SolverState.DONE
        return self.u

    def finish(self):
        self.state = SolverState.DONE
