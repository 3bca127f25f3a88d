"""
Perfect maze generation.

Mazes are carved with an iterative recursive backtracker over the odd
lattice points of an odd-sized square grid. Carving only ever moves into
cells that are still walls, so the open cells always form a spanning tree.
"""

import random
from typing import Callable, Optional

from .grid import CellType, Grid, entrance_of, exit_of

MIN_MAZE_SIZE = 3

# Lattice steps in (d_row, d_col): down, right, up, left
CARVE_DIRECTIONS = ((2, 0), (0, 2), (-2, 0), (0, -2))


class InvalidMazeSizeError(ValueError):
    """Exception raised when a maze size cannot be read as a number."""

    pass


def coerce_maze_size(size: int | str) -> int:
    """
    Coerce a requested size to a valid odd maze size.

    Sizes below the minimum become the minimum; even sizes are bumped to the
    next odd number.

    Raises:
        InvalidMazeSizeError: If size is not an integer or numeric string.
    """
    if isinstance(size, bool):
        raise InvalidMazeSizeError(f"Invalid maze size: {size!r}")
    try:
        value = int(size)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidMazeSizeError(f"Invalid maze size: {size!r}") from e

    if value < MIN_MAZE_SIZE:
        value = MIN_MAZE_SIZE
    if value % 2 == 0:
        value += 1
    return value


def generate_maze(
    size: int | str,
    rng: Optional[random.Random] = None,
    shuffle: Optional[Callable[[list], None]] = None,
) -> Grid:
    """
    Generate a perfect maze.

    Args:
        size: Requested side length, coerced with coerce_maze_size.
        rng: Random source. A fresh unseeded one is used if not provided.
        shuffle: In-place shuffle applied to the direction list for every
            popped cell. Defaults to rng.shuffle; pass a no-op to carve in
            the fixed order down, right, up, left.

    Returns:
        Grid with the entrance at (0, 1) and the exit at (N-1, N-2).
    """
    size = coerce_maze_size(size)
    if shuffle is None:
        shuffle = (rng or random.Random()).shuffle

    cells = [[CellType.WALL] * size for _ in range(size)]
    cells[1][1] = CellType.PATH
    stack = [(1, 1)]

    while stack:
        row, col = stack.pop()
        directions = list(CARVE_DIRECTIONS)
        shuffle(directions)

        for d_row, d_col in directions:
            n_row, n_col = row + d_row, col + d_col
            if (
                0 < n_row < size - 1
                and 0 < n_col < size - 1
                and cells[n_row][n_col] is CellType.WALL
            ):
                cells[row + d_row // 2][col + d_col // 2] = CellType.PATH
                cells[n_row][n_col] = CellType.PATH
                stack.append((n_row, n_col))

    entrance_row, entrance_col = entrance_of(size)
    exit_row, exit_col = exit_of(size)
    cells[entrance_row][entrance_col] = CellType.ENTRANCE
    cells[exit_row][exit_col] = CellType.EXIT

    return Grid(cells)


if __name__ == "__main__":
    # Quick look at a small maze
    maze = generate_maze(11, rng=random.Random(7))
    print(f"Generated {maze!r}:")
    print(maze.to_text())
