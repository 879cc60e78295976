"""Frontend interfaces for the board simulation."""

from .cli import CLIBoardLife

__all__ = ["CLIBoardLife"]
