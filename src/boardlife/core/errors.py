"""Exceptions raised by the board simulation."""

from typing import Optional


class BoardLifeError(Exception):
    """Base class for simulation errors."""


class UsageError(BoardLifeError):
    """Command-line arguments are missing or malformed."""


class BoardFileError(BoardLifeError):
    """The board file could not be opened, read or written."""

    def __init__(self, path: str, action: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.action = action
        message = f"Error opening {path} for {action}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class BoardFormatError(BoardLifeError, ValueError):
    """Board text does not match the declared grid size."""


class AllocationError(BoardLifeError, MemoryError):
    """Grid memory could not be obtained."""
