"""Conway's Game of Life generation engine."""

import time
from typing import Callable, Optional

import numpy as np

from .grid import ALIVE, DEAD, GridStore


class GenerationEngine:
    """Steps a GridStore through Game of Life generations.

    Rules are applied in a fixed order, each only where the earlier ones
    did not match:
    - Fewer than 2 neighbors: cell dies
    - Dead cell with exactly 3 neighbors: cell is born
    - 2 or 3 neighbors: cell is unchanged
    - More than 3 neighbors: cell dies
    """

    def __init__(
        self,
        store: GridStore,
        on_generation: Optional[Callable[["GenerationEngine"], None]] = None,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the engine.

        Args:
            store: Grid store holding the current and working grids
            on_generation: Called with the engine after every step of run()
            delay: Seconds to pause after each step of run()
            sleep: Function used for the pause
        """
        self.store = store
        self.on_generation = on_generation
        self.delay = delay
        self._sleep = sleep
        self._generation = 0
        self._stepping = False

    @property
    def generation(self) -> int:
        """Number of steps completed."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.store.current.population

    @property
    def stepping(self) -> bool:
        """Whether run() is in progress."""
        return self._stepping

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.store.snapshot()
        self._apply_rules()
        self._generation += 1

    def _apply_rules(self) -> None:
        """Apply the rules to the current grid, reading from the working grid."""
        neighbor_counts = self.store.working.count_all_neighbors()
        previous = self.store.working.cells
        cells = self.store.current.cells

        underpopulated = neighbor_counts < 2
        born = ~underpopulated & (previous == DEAD) & (neighbor_counts == 3)
        # 2 or 3 neighbors otherwise leaves the cell as it was
        overpopulated = ~underpopulated & ~born & (neighbor_counts > 3)

        cells[underpopulated] = DEAD
        cells[born] = ALIVE
        cells[overpopulated] = DEAD

    def run(self, generations: int) -> int:
        """Run a fixed number of generations.

        Args:
            generations: Number of steps to perform

        Returns:
            Number of steps performed

        Raises:
            ValueError: If generations is not a non-negative integer
        """
        if not isinstance(generations, (int, np.integer)) or isinstance(generations, bool) or generations < 0:
            raise ValueError(f"Generations must be a non-negative integer, got {generations!r}")

        self._stepping = True
        try:
            for _ in range(generations):
                self.step()
                if self.delay > 0:
                    self._sleep(self.delay)
                if self.on_generation is not None:
                    self.on_generation(self)
        finally:
            self._stepping = False

        return generations
