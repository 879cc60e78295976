"""A complete board simulation: load, step, persist."""

import time
from dataclasses import dataclass
from typing import Callable, List

from .board import DEFAULT_BOARD_PATH, read_board, write_board
from .engine import GenerationEngine
from .grid import GridStore

DEFAULT_DELAY = 0.75


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    size: int
    generations: int
    board_path: str = DEFAULT_BOARD_PATH
    delay: float = DEFAULT_DELAY

    def validate(self) -> List[str]:
        """Return a list of problems with this configuration (empty if valid)."""
        errors = []

        if self.size <= 0:
            errors.append("Size must be positive")

        if self.generations < 0:
            errors.append("Generations must be non-negative")

        if self.delay < 0:
            errors.append("Delay must be non-negative")

        return errors


class Simulation:
    """Holds the grids and engine for one board file.

    The board file is read once by load(), rewritten after every generation
    and once more when run() finishes.
    """

    def __init__(self, config: SimulationConfig, sleep: Callable[[float], None] = time.sleep) -> None:
        """Allocate the grids for a run.

        Args:
            config: Simulation configuration
            sleep: Function used for the pause between generations

        Raises:
            ValueError: If the configuration is invalid
            AllocationError: If the grids cannot be allocated
        """
        errors = config.validate()
        if errors:
            raise ValueError("; ".join(errors))

        self.config = config
        self.store = GridStore.create(config.size)
        self.engine = GenerationEngine(
            self.store,
            on_generation=lambda engine: self.persist(),
            delay=config.delay,
            sleep=sleep,
        )

    @property
    def generation(self) -> int:
        return self.engine.generation

    @property
    def population(self) -> int:
        return self.engine.population

    def load(self) -> None:
        """Read the board file into the current grid."""
        read_board(self.store.current, self.config.board_path)

    def persist(self) -> None:
        """Write the current grid to the board file."""
        write_board(self.store.current, self.config.board_path)

    def advance(self) -> int:
        """Run every configured generation on the loaded grid and write the final state.

        Returns:
            Final generation number
        """
        self.engine.run(self.config.generations)
        self.persist()
        return self.engine.generation

    def run(self) -> int:
        """Load the board, then advance() through every generation."""
        self.load()
        return self.advance()

    def close(self) -> None:
        self.store.destroy()

    def __enter__(self) -> "Simulation":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
