"""
Race mode: every solver against the same maze at once.

All solvers run as concurrent tasks over one shared, read-only Grid. A single
pair of timestamps brackets the whole batch, so each result's ``time`` is the
batch span and the figure that separates the algorithms is the step count.
Each result also carries ``own_time``, the solver's individually measured
run time.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .grid import Grid, MazePath
from .pathfinding import PATHFINDERS, RACE_ORDER

logger = logging.getLogger(__name__)


@dataclass
class RaceResult:
    """Outcome of one algorithm in a race."""
    algorithm: str
    time: float  # seconds, shared by the whole batch
    steps: int  # path length, 0 when no path
    own_time: float = 0.0  # seconds, this solver alone
    path: Optional[MazePath] = field(default=None, repr=False)

    @property
    def found(self) -> bool:
        return self.path is not None

    def summary(self) -> str:
        """One-line summary, e.g. 'BFS: Time: 0.012s, Steps: 97'."""
        return f"{self.algorithm.upper()}: Time: {self.time:.3f}s, Steps: {self.steps}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "algorithm": self.algorithm,
            "time": self.time,
            "own_time": self.own_time,
            "steps": self.steps,
            "found": self.found,
        }


def _timed_solve(grid: Grid, algorithm: str) -> tuple[Optional[MazePath], float]:
    started = time.perf_counter()
    path = PATHFINDERS[algorithm](grid, None, None)
    return path, time.perf_counter() - started


async def race(grid: Grid, algorithms: Iterable[str] = RACE_ORDER) -> list[RaceResult]:
    """
    Run several solvers concurrently against one grid.

    Args:
        grid: Maze shared by every solver.
        algorithms: Solver names, in the order results are returned.

    Returns:
        One RaceResult per algorithm, in the given order.

    Raises:
        ValueError: If an algorithm name is unknown.
    """
    algorithms = list(algorithms)
    unknown = [name for name in algorithms if name not in PATHFINDERS]
    if unknown:
        raise ValueError(f"Unknown algorithm(s): {', '.join(unknown)}")

    start_time = time.perf_counter()
    outcomes = await asyncio.gather(
        *(asyncio.to_thread(_timed_solve, grid, name) for name in algorithms)
    )
    elapsed = time.perf_counter() - start_time

    results = [
        RaceResult(
            algorithm=name,
            time=elapsed,
            steps=len(path) if path else 0,
            own_time=own_time,
            path=path,
        )
        for name, (path, own_time) in zip(algorithms, outcomes)
    ]

    logger.info(
        f"Race on {grid!r} finished in {elapsed * 1000:.2f}ms: "
        + ", ".join(f"{r.algorithm}={r.steps}" for r in results)
    )
    return results


def format_race_results(results: Iterable[RaceResult]) -> list[str]:
    """Summary lines for a race, in result order."""
    return [result.summary() for result in results]
