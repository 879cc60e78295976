"""Conway's Game of Life on a toroidal board persisted to a text file."""

__version__ = "0.1.0"

from .core.grid import Grid, GridStore
from .core.engine import GenerationEngine
from .core.simulation import Simulation, SimulationConfig

__all__ = ["Grid", "GridStore", "GenerationEngine", "Simulation", "SimulationConfig"]
