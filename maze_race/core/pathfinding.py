"""
Maze solvers.

Three interchangeable searches over a Grid, all 4-connected with unit step
cost:

- bfs: breadth-first over a queue of paths, always shortest
- dfs: depth-first over a stack of paths, first path found
- astar: best-first on g + Manhattan distance, always shortest

Every solver returns the path from start to end inclusive, or None when the
end cannot be reached. No path is a normal result, not an error.
"""

import logging
from collections import deque
from typing import Callable, Optional

from .grid import Coordinate, Grid, MazePath
from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

# Neighbor order in (d_row, d_col): right, down, left, up
SEARCH_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Solver = Callable[[Grid, Optional[Coordinate], Optional[Coordinate]], Optional[MazePath]]


def _endpoints(
    grid: Grid,
    start: Optional[Coordinate],
    end: Optional[Coordinate],
) -> tuple[Coordinate, Coordinate]:
    return (start if start is not None else grid.entrance,
            end if end is not None else grid.exit)


# Path prefix as a linked node: (last coordinate, node for the rest or None)
PathNode = tuple[Coordinate, Optional["PathNode"]]


def unroll_path(node: PathNode) -> MazePath:
    """Expand a linked path node into a start-to-end coordinate list."""
    path = []
    current: Optional[PathNode] = node
    while current is not None:
        coord, current = current
        path.append(coord)
    path.reverse()
    return path


def breadth_first_search(
    grid: Grid,
    start: Optional[Coordinate] = None,
    end: Optional[Coordinate] = None,
) -> Optional[MazePath]:
    """Shortest path by level-order exploration, or None."""
    start, end = _endpoints(grid, start, end)
    if not grid.is_open(start):
        return None

    queue: deque[PathNode] = deque([(start, None)])
    visited = {start}

    while queue:
        node = queue.popleft()
        current = node[0]

        if current == end:
            return unroll_path(node)

        for neighbor in grid.open_neighbors(current, SEARCH_DIRECTIONS):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, node))

    return None


def depth_first_search(
    grid: Grid,
    start: Optional[Coordinate] = None,
    end: Optional[Coordinate] = None,
) -> Optional[MazePath]:
    """First path found by depth-first exploration, or None. Not always shortest."""
    start, end = _endpoints(grid, start, end)
    if not grid.is_open(start):
        return None

    stack: list[PathNode] = [(start, None)]
    visited = {start}

    while stack:
        node = stack.pop()
        current = node[0]

        if current == end:
            return unroll_path(node)

        for neighbor in grid.open_neighbors(current, SEARCH_DIRECTIONS):
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append((neighbor, node))

    return None


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(came_from: dict[Coordinate, Coordinate], current: Coordinate) -> MazePath:
    """Walk predecessor links back from current and return them in travel order."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def a_star_search(
    grid: Grid,
    start: Optional[Coordinate] = None,
    end: Optional[Coordinate] = None,
) -> Optional[MazePath]:
    """
    Shortest path by A* with the Manhattan heuristic, or None.

    A coordinate is re-enqueued every time its g-score improves. Older
    entries for it stay in the queue and are skipped once the coordinate
    has been expanded.
    """
    start, end = _endpoints(grid, start, end)
    if not grid.is_open(start):
        return None

    open_set: PriorityQueue[Coordinate] = PriorityQueue()
    came_from: dict[Coordinate, Coordinate] = {}
    g_score: dict[Coordinate, int] = {start: 0}
    f_score: dict[Coordinate, int] = {start: manhattan_distance(start, end)}
    expanded: set[Coordinate] = set()

    open_set.enqueue(start, f_score[start])

    while not open_set.is_empty():
        current = open_set.dequeue()

        if current == end:
            return reconstruct_path(came_from, current)

        if current in expanded:
            continue
        expanded.add(current)

        for neighbor in grid.open_neighbors(current, SEARCH_DIRECTIONS):
            tentative_g = g_score[current] + 1

            if tentative_g < g_score.get(neighbor, float("inf")):
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                f_score[neighbor] = tentative_g + manhattan_distance(neighbor, end)
                open_set.enqueue(neighbor, f_score[neighbor])

    return None


PATHFINDERS: dict[str, Solver] = {
    "bfs": breadth_first_search,
    "dfs": depth_first_search,
    "astar": a_star_search,
}

# Fixed order used by race mode and listings
RACE_ORDER = ("bfs", "dfs", "astar")

DEFAULT_ALGORITHM = "bfs"


def resolve_algorithm(algorithm: Optional[str]) -> str:
    """Normalize an algorithm name. Unknown or missing names fall back to bfs."""
    name = (algorithm or "").strip().lower()
    if name not in PATHFINDERS:
        if algorithm:
            logger.warning(f"Unknown algorithm '{algorithm}', falling back to {DEFAULT_ALGORITHM}")
        return DEFAULT_ALGORITHM
    return name


def solve(grid: Grid, algorithm: Optional[str] = DEFAULT_ALGORITHM) -> Optional[MazePath]:
    """
    Solve a grid from its entrance to its exit.

    Args:
        grid: Maze to solve. Read only.
        algorithm: One of bfs, dfs, astar. Anything else uses bfs.

    Returns:
        Path from entrance to exit inclusive, or None if there is none.
    """
    return PATHFINDERS[resolve_algorithm(algorithm)](grid, None, None)
