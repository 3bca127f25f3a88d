"""
Maze grid model.

A grid is a square, odd-sized matrix of cells. The entrance always sits at
row 0, column 1 and the exit at row N-1, column N-2.

Text Format:
    S = Entrance
    E = Exit
    X = Wall (impassable)
    . = Open path (can also be space)
    * = Open path marked as part of a solution
"""

from enum import Enum
from typing import Iterable, Iterator, Optional

Coordinate = tuple[int, int]
MazePath = list[Coordinate]


class CellType(Enum):
    """Types of cells in the maze."""
    PATH = 0
    WALL = 1
    ENTRANCE = 2
    EXIT = 3

    @property
    def char(self) -> str:
        """Character used for this cell in text grids."""
        return _CELL_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert character to CellType."""
        mapping = {
            ".": cls.PATH,
            " ": cls.PATH,
            "*": cls.PATH,
            "X": cls.WALL,
            "S": cls.ENTRANCE,
            "E": cls.EXIT,
        }
        return mapping.get(char, cls.WALL)


_CELL_CHARS = {
    CellType.PATH: ".",
    CellType.WALL: "X",
    CellType.ENTRANCE: "S",
    CellType.EXIT: "E",
}


def entrance_of(size: int) -> Coordinate:
    """Fixed entrance coordinate for a grid of the given side."""
    return (0, 1)


def exit_of(size: int) -> Coordinate:
    """Fixed exit coordinate for a grid of the given side."""
    return (size - 1, size - 2)


class Grid:
    """
    Immutable square maze grid.

    Rows are stored as tuples so a grid can be shared between concurrent
    searches without copying.
    """

    __slots__ = ("_cells", "_size")

    def __init__(self, cells: Iterable[Iterable[CellType]]):
        rows = tuple(tuple(row) for row in cells)
        if not rows or any(len(row) != len(rows) for row in rows):
            raise ValueError("Grid must be a non-empty square matrix")
        self._cells = rows
        self._size = len(rows)

    @property
    def size(self) -> int:
        return self._size

    @property
    def entrance(self) -> Coordinate:
        return entrance_of(self._size)

    @property
    def exit(self) -> Coordinate:
        return exit_of(self._size)

    def cell(self, coord: Coordinate) -> CellType:
        """Get cell type at coordinate. Out of bounds reads as wall."""
        row, col = coord
        if not (0 <= row < self._size and 0 <= col < self._size):
            return CellType.WALL
        return self._cells[row][col]

    def is_open(self, coord: Coordinate) -> bool:
        return self.cell(coord) is not CellType.WALL

    def open_neighbors(
        self,
        coord: Coordinate,
        directions: Iterable[Coordinate],
    ) -> Iterator[Coordinate]:
        """Yield non-wall neighbors of coord in the given direction order."""
        row, col = coord
        for d_row, d_col in directions:
            neighbor = (row + d_row, col + d_col)
            if self.is_open(neighbor):
                yield neighbor

    def open_cells(self) -> list[Coordinate]:
        """All non-wall coordinates in row-major order."""
        return [
            (row, col)
            for row in range(self._size)
            for col in range(self._size)
            if self._cells[row][col] is not CellType.WALL
        ]

    def to_rows(self, path: Optional[Iterable[Coordinate]] = None) -> list[str]:
        """
        Serialize the grid as text rows.

        Args:
            path: If provided, open cells on the path are marked with '*'.
        """
        marked = set(path) if path else set()
        rows = []
        for row_index, row in enumerate(self._cells):
            line = ""
            for col_index, cell in enumerate(row):
                if cell is CellType.PATH and (row_index, col_index) in marked:
                    line += "*"
                else:
                    line += cell.char
            rows.append(line)
        return rows

    def to_text(self, path: Optional[Iterable[Coordinate]] = None) -> str:
        return "\n".join(self.to_rows(path))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """Build a grid from text rows without validation. See maze_parser."""
        return cls([CellType.from_char(char) for char in row] for row in rows)

    def __getitem__(self, row: int) -> tuple[CellType, ...]:
        return self._cells[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid(size={self._size})"
