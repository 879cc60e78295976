"""Square toroidal grids and the two-grid store used by the engine."""

from typing import Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .errors import AllocationError

ALIVE = 1
DEAD = 0

BOARD_ALIVE = "#"
BOARD_DEAD = "-"


class Grid:
    """An N x N matrix of cells indexed as ``[row, col]``.

    Cells are stored in a numpy array and every cell starts DEAD. The size is
    fixed at construction. Neighbour counting wraps around both axes, so the
    grid has no edges.
    """

    def __init__(self, size: int) -> None:
        """Allocate a new grid.

        Args:
            size: Number of rows (and columns)

        Raises:
            ValueError: If size is not a positive integer
            AllocationError: If the cell buffer cannot be allocated
        """
        if not isinstance(size, (int, np.integer)) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")

        self.size = int(size)
        try:
            self._cells: Optional[np.ndarray] = np.zeros((self.size, self.size), dtype=np.int8)
            self._torch_input = torch.zeros(1, 1, self.size, self.size, dtype=torch.float32)
        except (MemoryError, RuntimeError, ValueError) as e:
            raise AllocationError(f"Cannot allocate {self.size}x{self.size} grid: {e}") from e

        # Set single-threaded, the grids are small and stepped one at a time
        torch.set_num_threads(1)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._require_cells()

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.size, self.size)

    @property
    def released(self) -> bool:
        """Whether release() has dropped the cell buffer."""
        return self._cells is None

    def _require_cells(self) -> np.ndarray:
        if self._cells is None:
            raise RuntimeError("Grid has been released")
        return self._cells

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.size}x{self.size} grid")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are outside [0, size)
        """
        cells = self._require_cells()
        self._check_bounds(row, col)
        return bool(cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are outside [0, size)
        """
        cells = self._require_cells()
        self._check_bounds(row, col)
        cells[row, col] = ALIVE if alive else DEAD

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._require_cells().fill(DEAD)

    def copy_from(self, other: "Grid") -> None:
        """Copy cell states from another grid.

        Args:
            other: Source grid to copy from

        Raises:
            ValueError: If grids have different dimensions
        """
        if other.shape != self.shape:
            raise ValueError(f"Grid dimensions don't match: {other.shape} vs {self.shape}")

        self._require_cells()[:] = other.cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._require_cells() > 0))

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell, wrapping at the edges.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        cells = self._require_cells()
        self._check_bounds(row, col)

        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue
                count += int(cells[(row + dr) % self.size, (col + dc) % self.size])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Circular padding of one cell gives the same wraparound as indexing
        modulo size, including on 1x1 and 2x2 grids.

        Returns:
            2D array with neighbor counts for each cell
        """
        cells = self._require_cells()
        self._torch_input[0, 0] = torch.from_numpy((cells > 0).astype(np.float32))

        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)

        return neighbors[0, 0].numpy().astype(np.int8)

    def to_list(self) -> list:
        """Convert grid to nested list of 0/1 rows."""
        return self._require_cells().tolist()

    def from_list(self, data: list) -> None:
        """Load grid from nested list of rows.

        Args:
            data: 2D list with cell states

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.array(data, dtype=np.int8)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")

        self._require_cells()[:] = (arr > 0).astype(np.int8)

    def release(self) -> None:
        """Drop the cell buffer. Later cell access raises RuntimeError."""
        self._cells = None
        self._torch_input = None

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self.cells, other.cells)

    def __str__(self) -> str:
        """Board text: '#' for living cells and '-' for dead ones."""
        cells = self._require_cells()
        return "\n".join("".join(BOARD_ALIVE if cell else BOARD_DEAD for cell in row) for row in cells)


class GridStore:
    """Owns the current grid and the working snapshot the engine reads from."""

    def __init__(self, current: Grid, working: Grid) -> None:
        if current.shape != working.shape:
            raise ValueError(f"Grid dimensions don't match: {current.shape} vs {working.shape}")
        self.current = current
        self.working = working
        self._destroyed = False

    @classmethod
    def create(cls, size: int) -> "GridStore":
        """Allocate two all-dead size x size grids.

        Raises:
            AllocationError: If either grid cannot be allocated
        """
        return cls(Grid(size), Grid(size))

    @property
    def size(self) -> int:
        """Number of rows and columns in each grid."""
        return self.current.size

    @property
    def destroyed(self) -> bool:
        """Whether destroy() has released both grids."""
        return self._destroyed

    def get(self, grid: Grid, row: int, col: int) -> bool:
        """Get a cell of one of the store's grids."""
        return grid.get_cell(row, col)

    def set(self, grid: Grid, row: int, col: int, alive: bool) -> None:
        """Set a cell of one of the store's grids."""
        grid.set_cell(row, col, alive)

    def copy(self, src: Grid, dst: Grid) -> None:
        """Overwrite dst with the cells of src."""
        dst.copy_from(src)

    def snapshot(self) -> None:
        """Overwrite the working grid with the current grid."""
        self.copy(self.current, self.working)

    def destroy(self) -> None:
        """Release both grids. Safe to call more than once."""
        if self._destroyed:
            return
        self.current.release()
        self.working.release()
        self._destroyed = True
