"""Maze service: generation, solving and races behind the API."""

import asyncio
import logging
import random
from typing import Optional

from maze_race.config import get_settings
from maze_race.core import (
    Grid,
    MazePath,
    RaceResult,
    coerce_maze_size,
    generate_maze,
    parse_grid_rows,
    race,
    solve,
)
from maze_race.core.pathfinding import resolve_algorithm

logger = logging.getLogger(__name__)


class MazeSizeLimitError(ValueError):
    """Exception raised when a requested maze is larger than allowed."""

    pass


class MazeService:
    """Service applying configuration and logging around the maze core."""

    def __init__(self):
        self.settings = get_settings()

    def generate(self, size: Optional[int] = None, seed: Optional[int] = None) -> Grid:
        """
        Generate a new maze.

        Args:
            size: Requested side length (default from settings).
            seed: Optional seed for a reproducible maze.

        Returns:
            Generated Grid.

        Raises:
            MazeSizeLimitError: If the coerced size exceeds the configured cap.
        """
        requested = self.settings.default_maze_size if size is None else size
        coerced = coerce_maze_size(requested)
        if coerced > self.settings.max_maze_size:
            raise MazeSizeLimitError(
                f"Maze size {coerced} exceeds the maximum of {self.settings.max_maze_size}"
            )

        grid = generate_maze(coerced, rng=random.Random(seed))
        logger.info(f"Generated {coerced}x{coerced} maze (requested={requested}, seed={seed})")
        return grid

    def parse(self, rows: list[str]) -> Grid:
        """Parse a client-supplied grid. Parser errors propagate."""
        if len(rows) > self.settings.max_maze_size:
            raise MazeSizeLimitError(
                f"Maze size {len(rows)} exceeds the maximum of {self.settings.max_maze_size}"
            )
        return parse_grid_rows(rows)

    async def solve(self, grid: Grid, algorithm: Optional[str] = None) -> tuple[str, Optional[MazePath]]:
        """
        Solve a grid with one algorithm in a worker thread.

        Returns:
            Tuple of (algorithm actually used, path or None).
        """
        name = resolve_algorithm(algorithm or self.settings.default_algorithm)
        path = await asyncio.to_thread(solve, grid, name)

        if path is None:
            logger.info(f"{name} found no path through {grid!r}")
        else:
            logger.info(f"{name} solved {grid!r} in {len(path)} steps")
        return name, path

    async def race(self, grid: Grid) -> list[RaceResult]:
        """Race every algorithm on the grid, in fixed order."""
        return await race(grid)


# Singleton instance
_maze_service: Optional[MazeService] = None


def get_maze_service() -> MazeService:
    """Get singleton maze service instance."""
    global _maze_service
    if _maze_service is None:
        _maze_service = MazeService()
    return _maze_service
