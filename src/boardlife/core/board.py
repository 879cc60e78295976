"""Plain-text board files.

A board file holds N lines of N characters, each line ending in a newline.
``#`` marks a living cell and ``-`` a dead one. The size is not stored in
the file, so readers are told what to expect and reject anything else.
"""

from typing import List

from .errors import BoardFileError, BoardFormatError
from .grid import ALIVE, BOARD_ALIVE, BOARD_DEAD, DEAD, Grid

DEFAULT_BOARD_PATH = "board"

_SYMBOLS = {BOARD_ALIVE: ALIVE, BOARD_DEAD: DEAD}


def format_board(grid: Grid) -> str:
    """Render a grid in board file format, one newline-terminated line per row."""
    return str(grid) + "\n"


def format_digits(grid: Grid) -> str:
    """Render a grid as rows of 1s and 0s for debugging."""
    return "\n".join("".join("1" if cell else "0" for cell in row) for row in grid.cells)


def parse_board(text: str, size: int) -> List[List[int]]:
    """Parse board text into rows of cell states.

    Args:
        text: Board file contents
        size: Expected number of rows and columns

    Returns:
        List of ``size`` rows, each a list of ``size`` 0/1 values

    Raises:
        BoardFormatError: If the text does not describe a size x size board
    """
    lines = text.split("\n")
    # A single newline may end the last line
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    if len(lines) != size:
        raise BoardFormatError(f"Expected {size} lines, found {len(lines)}")

    rows = []
    for row_index, line in enumerate(lines):
        if len(line) != size:
            raise BoardFormatError(
                f"Line {row_index + 1}: expected {size} characters, found {len(line)}"
            )
        row = []
        for col_index, symbol in enumerate(line):
            if symbol not in _SYMBOLS:
                raise BoardFormatError(
                    f"Line {row_index + 1}, column {col_index + 1}: unexpected character {symbol!r}"
                )
            row.append(_SYMBOLS[symbol])
        rows.append(row)

    return rows


def read_board(grid: Grid, path: str = DEFAULT_BOARD_PATH) -> None:
    """Load a board file into a grid.

    Raises:
        BoardFileError: If the file cannot be opened or read
        BoardFormatError: If the contents do not match the grid size
    """
    try:
        with open(path, "r", encoding="ascii", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BoardFileError(str(path), "reading", str(e)) from e

    grid.from_list(parse_board(text, grid.size))


def write_board(grid: Grid, path: str = DEFAULT_BOARD_PATH) -> None:
    """Overwrite a board file with the grid's cells.

    Raises:
        BoardFileError: If the file cannot be opened or written
    """
    text = format_board(grid)
    try:
        with open(path, "w", encoding="ascii", newline="") as f:
            f.write(text)
    except OSError as e:
        raise BoardFileError(str(path), "writing", str(e)) from e
