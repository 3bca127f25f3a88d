"""
Grid parser for supplied mazes.

Validates grids handed back by clients (text rows) before any solver sees
them.

Maze Format:
    S = Entrance, only at row 0, column 1
    E = Exit, only at row N-1, column N-2
    X = Wall (impassable)
    . = Open path (can also be space or '*')

The grid must be square with an odd side of at least 3. The entrance and
exit cells are always written at their fixed positions, even when the text
leaves them out.
"""

from typing import Iterable, Optional

from .grid import CellType, Grid, entrance_of, exit_of
from .maze_generator import MIN_MAZE_SIZE


class MazeParseError(Exception):
    """Exception raised when maze parsing fails."""

    pass


class MazeValidationError(Exception):
    """Exception raised when maze validation fails."""

    pass


VALID_CHARS = {"S", "E", "X", ".", " ", "*"}


def parse_grid_rows(rows: Iterable[str]) -> Grid:
    """
    Parse text rows into a Grid.

    Args:
        rows: One string per grid row.

    Returns:
        Grid with entrance and exit at their fixed positions.

    Raises:
        MazeParseError: If there are no rows.
        MazeValidationError: If the grid is not a valid maze grid.
    """
    lines = list(rows)
    if not lines or not any(line.strip() for line in lines):
        raise MazeParseError("Maze text is empty")

    size = len(lines)
    if size < MIN_MAZE_SIZE:
        raise MazeValidationError(
            f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, got {size} rows"
        )
    if size % 2 == 0:
        raise MazeValidationError(f"Maze size must be odd, got {size}")

    entrance = entrance_of(size)
    exit_pos = exit_of(size)
    cells: list[list[CellType]] = []

    for row, line in enumerate(lines):
        if len(line) != size:
            raise MazeValidationError(
                f"Maze must be square: row {row} has {len(line)} cells, expected {size}"
            )

        row_cells = []
        for col, char in enumerate(line):
            if char not in VALID_CHARS:
                raise MazeValidationError(
                    f"Invalid character '{char}' at position ({row}, {col}). "
                    f"Valid characters: {', '.join(sorted(VALID_CHARS))}"
                )
            if char == "S" and (row, col) != entrance:
                raise MazeValidationError(
                    f"Entrance must be at {entrance}, found one at ({row}, {col})"
                )
            if char == "E" and (row, col) != exit_pos:
                raise MazeValidationError(
                    f"Exit must be at {exit_pos}, found one at ({row}, {col})"
                )
            row_cells.append(CellType.from_char(char))
        cells.append(row_cells)

    cells[entrance[0]][entrance[1]] = CellType.ENTRANCE
    cells[exit_pos[0]][exit_pos[1]] = CellType.EXIT

    return Grid(cells)


def parse_grid_text(maze_text: str) -> Grid:
    """
    Parse multi-line maze text into a Grid.

    Raises:
        MazeParseError: If the text is empty.
        MazeValidationError: If the grid is not a valid maze grid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    return parse_grid_rows(maze_text.strip("\n").split("\n"))


def validate_grid_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_grid_text(maze_text)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)
