"""Command-line interface for running a board simulation."""

import argparse
import sys
import time
from typing import List, Optional, Tuple

from ..core.board import DEFAULT_BOARD_PATH, format_digits
from ..core.errors import AllocationError, BoardFileError, BoardFormatError, UsageError
from ..core.simulation import DEFAULT_DELAY, Simulation, SimulationConfig


class BoardArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:
        raise UsageError(message)


class CLIBoardLife:
    """Command-line interface for running board simulations."""

    def run_simulation(
        self,
        size: int,
        generations: int,
        board_path: str = DEFAULT_BOARD_PATH,
        delay: float = DEFAULT_DELAY,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, dict]:
        """Run a simulation against a board file.

        Args:
            size: Number of rows and columns on the board
            generations: Number of generations to run
            board_path: Board file to read from and write to
            delay: Seconds to pause between generations
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_generation, statistics)
        """
        config = SimulationConfig(size=size, generations=generations, board_path=board_path, delay=delay)

        with Simulation(config) as simulation:
            if verbose:
                print(f"Loading {size}x{size} board from '{board_path}'")

            simulation.load()
            initial_population = simulation.population

            if verbose:
                print(f"Initial population: {initial_population} cells")

            if show_grid:
                print("\nInitial grid:")
                print(self._format_grid(simulation))

            if verbose:
                print(f"\nRunning {generations} generations (delay {delay:.2f}s)...")

            start_time = time.time()
            simulation.advance()
            duration = time.time() - start_time

            if show_grid:
                print(f"\nFinal grid (generation {simulation.generation}):")
                print(self._format_grid(simulation))

            stats = {
                "grid_size": (size, size),
                "initial_population": initial_population,
                "population": simulation.population,
                "board_path": board_path,
                "duration_seconds": duration,
            }
            return simulation.generation, stats

    def _format_grid(self, simulation: Simulation, max_size: int = 50) -> str:
        """Format the current grid for display, truncating if too large.

        Args:
            simulation: Simulation whose current grid is shown
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        size = simulation.store.size
        if size > max_size:
            return f"Grid too large to display ({size}x{size})"

        return format_digits(simulation.store.current)


def create_parser() -> BoardArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = BoardArgumentParser(
        prog="boardlife",
        description="Run Conway's Game of Life on a toroidal board stored in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run 100 generations on the 20x20 board in ./board
  boardlife 20 100

  # Use another board file with no pause between generations
  boardlife 20 100 --board glider.txt --delay 0

  # Print the board before and after
  boardlife 8 4 --show-grid --verbose
        """,
    )

    parser.add_argument("size", type=int, help="Number of rows and columns on the board")

    parser.add_argument("generations", type=int, help="Number of generations to run")

    parser.add_argument(
        "-b",
        "--board",
        default=DEFAULT_BOARD_PATH,
        help=f"Board file to read and rewrite (default: {DEFAULT_BOARD_PATH})",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds to pause between generations (default: {DEFAULT_DELAY})",
    )

    parser.add_argument("-s", "--show-grid", action="store_true", help="Show initial and final grid states")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress and statistics")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    config = SimulationConfig(
        size=args.size, generations=args.generations, board_path=args.board, delay=args.delay
    )
    errors = config.validate()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(final_generation: int, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    if not verbose:
        return

    print(f"\nSimulation completed after {final_generation} generations")
    print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
    print(f"  Initial population: {stats['initial_population']}")
    print(f"  Final population: {stats['population']}")
    print(f"  Board file: {stats['board_path']}")
    print(f"  Duration: {stats['duration_seconds']:.3f} seconds")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if not validate_args(args):
        return 1

    cli = CLIBoardLife()

    try:
        final_generation, stats = cli.run_simulation(
            size=args.size,
            generations=args.generations,
            board_path=args.board,
            delay=args.delay,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )
        print_results(final_generation, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (BoardFileError, BoardFormatError, AllocationError, IndexError, ValueError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
