# Core module
from .grid import CellType, Coordinate, Grid, MazePath
from .maze_generator import InvalidMazeSizeError, coerce_maze_size, generate_maze
from .maze_parser import (
    MazeParseError,
    MazeValidationError,
    parse_grid_rows,
    parse_grid_text,
    validate_grid_text,
)
from .pathfinding import (
    PATHFINDERS,
    RACE_ORDER,
    a_star_search,
    breadth_first_search,
    depth_first_search,
    solve,
)
from .priority_queue import PriorityQueue
from .race import RaceResult, format_race_results, race

__all__ = [
    "CellType",
    "Coordinate",
    "Grid",
    "MazePath",
    "InvalidMazeSizeError",
    "coerce_maze_size",
    "generate_maze",
    "MazeParseError",
    "MazeValidationError",
    "parse_grid_rows",
    "parse_grid_text",
    "validate_grid_text",
    "PATHFINDERS",
    "RACE_ORDER",
    "a_star_search",
    "breadth_first_search",
    "depth_first_search",
    "solve",
    "PriorityQueue",
    "RaceResult",
    "format_race_results",
    "race",
]
