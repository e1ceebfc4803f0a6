"""
Simulation parameters for the hotplate solver
"""
from dataclasses import dataclass

# Plate parameters
PLATE_SIZE = 10            # Edge length of the square plate
INITIAL_TEMP = 100.0       # Top and bottom boundary temperature
HEAT_EPSILON = 0.1         # Largest per-cell change still counted as steady
ITERATION_LIMIT = 999999   # Cap on relaxations while looking for steady state
FIXED_ITERATIONS = 3       # Relaxations applied to the plate loaded from file

# Output parameters
OUTPUT_PRECISION = 3
OUTPUT_WIDTH = 9
OUTPUT_PATH = "Hotplate.csv"
INPUT_PATH = "Inputplate.txt"


@dataclass(frozen=True)
class PlateConfig:
    """Configuration for a hotplate run"""
    size: int = PLATE_SIZE                      # N, plate is N x N
    initial_temp: float = INITIAL_TEMP          # Boundary temperature of rows 0 and N-1
    epsilon: float = HEAT_EPSILON               # Convergence threshold
    iteration_limit: int = ITERATION_LIMIT      # Safety valve for the driver loop
    fixed_iterations: int = FIXED_ITERATIONS    # Cycles for the loaded plate
    output_precision: int = OUTPUT_PRECISION    # Decimals per cell
    output_width: int = OUTPUT_WIDTH            # Field width per cell
    output_path: str = OUTPUT_PATH
    input_path: str = INPUT_PATH

    def __post_init__(self):
        if self.size < 3:
            raise ValueError(f"Plate size must be at least 3, got {self.size}")
        if self.epsilon < 0:
            raise ValueError(f"Epsilon must be non-negative, got {self.epsilon}")
        if self.iteration_limit < 1:
            raise ValueError(f"Iteration limit must be at least 1, got {self.iteration_limit}")
        if self.fixed_iterations < 0:
            raise ValueError(f"Fixed iterations must be non-negative, got {self.fixed_iterations}")
        if self.output_precision < 0:
            raise ValueError(f"Output precision must be non-negative, got {self.output_precision}")
        if self.output_width < 1:
            raise ValueError(f"Output width must be positive, got {self.output_width}")

    @classmethod
    def from_args(cls, args) -> "PlateConfig":
        """Build a config from parsed command line arguments"""
        return cls(
            size=args.size,
            initial_temp=args.initial_temp,
            epsilon=args.epsilon,
            iteration_limit=args.iteration_limit,
            fixed_iterations=args.fixed_iterations,
            output_precision=args.precision,
            output_width=args.width,
            output_path=args.output,
            input_path=args.input,
        )
