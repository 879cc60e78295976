"""Core board simulation logic."""

from .grid import Grid, GridStore, ALIVE, DEAD
from .engine import GenerationEngine
from .board import read_board, write_board, format_board, parse_board
from .simulation import Simulation, SimulationConfig
from .errors import BoardLifeError, UsageError, BoardFileError, BoardFormatError, AllocationError

__all__ = [
    "Grid",
    "GridStore",
    "ALIVE",
    "DEAD",
    "GenerationEngine",
    "read_board",
    "write_board",
    "format_board",
    "parse_board",
    "Simulation",
    "SimulationConfig",
    "BoardLifeError",
    "UsageError",
    "BoardFileError",
    "BoardFormatError",
    "AllocationError",
]
