#!/usr/bin/env python3
"""
Hotplate simulator
Finds the steady state of a plate with hot top and bottom edges,
then relaxes a plate read from a text file a fixed number of times.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from hotplate import config as defaults
from hotplate.config import PlateConfig
from hotplate.logging_config import setup_logging
from hotplate.plate_io import PlateIOError, export_plate, load_plate, output_plate
from hotplate.solver import HotplateSolver

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Hotplate steady state simulator')
    parser.add_argument('--size', type=int, default=defaults.PLATE_SIZE, help='Plate edge length')
    parser.add_argument('--initial-temp', type=float, default=defaults.INITIAL_TEMP,
                        help='Temperature of the top and bottom edges')
    parser.add_argument('--epsilon', type=float, default=defaults.HEAT_EPSILON,
                        help='Largest per-cell change counted as steady')
    parser.add_argument('--iteration-limit', type=int, default=defaults.ITERATION_LIMIT,
                        help='Maximum number of relaxation passes')
    parser.add_argument('--fixed-iterations', type=int, default=defaults.FIXED_ITERATIONS,
                        help='Relaxation passes applied to the input plate')
    parser.add_argument('--precision', type=int, default=defaults.OUTPUT_PRECISION,
                        help='Decimal places per printed cell')
    parser.add_argument('--width', type=int, default=defaults.OUTPUT_WIDTH,
                        help='Field width per printed cell')
    parser.add_argument('--output', default=defaults.OUTPUT_PATH, help='CSV file for the final plate')
    parser.add_argument('--input', default=defaults.INPUT_PATH, help='Text file holding the input plate')
    parser.add_argument('--skip-input', action='store_true', help='Do not process the input plate')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    parser.add_argument('--log-file', default=None, help='Also write log records to this file')
    return parser.parse_args(argv)


def run(config: PlateConfig, stream: Optional[TextIO] = None, skip_input: bool = False) -> int:
    """
    Run the full simulation and return the exit status

    Prints the initial plate, the plate after one pass and the steady plate,
    exports the steady plate, then relaxes the input plate.
    """
    if stream is None:
        stream = sys.stdout

    def show(plate):
        output_plate(plate, stream, config.output_precision, config.output_width)

    solver = HotplateSolver(config)

    stream.write("Hotplate simulator\n\n")
    stream.write("Printing the initial plate values...\n")
    show(solver.plate)

    stream.write("\nPrinting plate after one iteration...\n")
    show(solver.first_iteration())

    result = solver.iterate_to_steady_state()

    stream.write("\nPrinting final plate...\n")
    show(result.plate)

    stream.write(f"\nWriting final plate to \"{config.output_path}\"...\n\n")
    try:
        export_plate(result.plate, config.output_path, config.output_precision, config.output_width)
    except PlateIOError as err:
        print(f"Error occurred when writing to CSV: {err}", file=sys.stderr)
        return 1

    if skip_input:
        solver.finish()
        return 0

    try:
        input_plate = load_plate(config.input_path, config.size)
    except PlateIOError as err:
        print(f"Error occurred when reading the input plate: {err}", file=sys.stderr)
        return 1

    stream.write(f"Printing input plate after {config.fixed_iterations} updates...\n")
    show(solver.run_fixed(input_plate))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function - parse arguments and run simulation"""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        config = PlateConfig.from_args(args)
    except ValueError as err:
        logger.error(f"Invalid configuration: {err}")
        print(f"Invalid configuration: {err}", file=sys.stderr)
        return 2

    return run(config, skip_input=args.skip_input)


if __name__ == "__main__":
    sys.exit(main())
