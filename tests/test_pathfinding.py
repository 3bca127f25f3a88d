"""Tests for the maze solvers."""

import logging
import random
import tracemalloc

import pytest

from maze_race.core import (
    PATHFINDERS,
    Grid,
    PriorityQueue,
    a_star_search,
    breadth_first_search,
    depth_first_search,
    generate_maze,
    solve,
)
from maze_race.core.pathfinding import (
    manhattan_distance,
    reconstruct_path,
    resolve_algorithm,
    unroll_path,
)


def assert_valid_path(grid: Grid, path: list) -> None:
    """Check that a path runs entrance to exit through adjacent open cells."""
    assert path[0] == grid.entrance
    assert path[-1] == grid.exit
    assert len(set(path)) == len(path)
    for coord in path:
        assert grid.is_open(coord)
    for a, b in zip(path, path[1:]):
        assert manhattan_distance(a, b) == 1


class TestBreadthFirstSearch:
    """Tests for breadth-first search."""

    def test_fixed_maze_shortest_path(self, fixed_grid):
        """Test the hand-computed path through the fixed 5x5 maze."""
        path = breadth_first_search(fixed_grid)

        assert path == [(0, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (4, 3)]
        assert len(path) == 7

    def test_blocked_maze_returns_none(self, blocked_grid):
        """Test that an unreachable exit gives None."""
        assert breadth_first_search(blocked_grid) is None

    def test_looped_maze_shortest_path(self, looped_grid):
        """Test the shortest path length on a grid with a loop."""
        path = breadth_first_search(looped_grid)
        assert_valid_path(looped_grid, path)
        assert len(path) == 11

    def test_custom_endpoints(self, fixed_grid):
        """Test searching between explicit coordinates."""
        assert breadth_first_search(fixed_grid, (3, 1), (3, 3)) == [
            (3, 1), (2, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3)
        ]

    def test_start_equals_end(self, fixed_grid):
        """Test that a search from a cell to itself is a single step."""
        assert breadth_first_search(fixed_grid, (1, 1), (1, 1)) == [(1, 1)]

    def test_start_on_wall_returns_none(self, fixed_grid):
        """Test that starting inside a wall finds nothing."""
        assert breadth_first_search(fixed_grid, (0, 0), (4, 3)) is None


class TestDepthFirstSearch:
    """Tests for depth-first search."""

    def test_fixed_maze_path(self, fixed_grid):
        """Test that the only route through a tree is found."""
        path = depth_first_search(fixed_grid)
        assert path == [(0, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (4, 3)]

    def test_blocked_maze_returns_none(self, blocked_grid):
        """Test that an unreachable exit gives None."""
        assert depth_first_search(blocked_grid) is None

    def test_deterministic(self, seeded_grid):
        """Test that repeated runs return the same path."""
        assert depth_first_search(seeded_grid) == depth_first_search(seeded_grid)

    def test_not_shorter_than_bfs_on_looped_grid(self, looped_grid):
        """Test that depth-first paths are valid and never beat BFS."""
        path = depth_first_search(looped_grid)
        assert_valid_path(looped_grid, path)
        assert len(path) >= len(breadth_first_search(looped_grid))


class TestAStarSearch:
    """Tests for A* search."""

    def test_fixed_maze_path(self, fixed_grid):
        """Test the path through the fixed 5x5 maze."""
        assert a_star_search(fixed_grid) == breadth_first_search(fixed_grid)

    def test_blocked_maze_returns_none(self, blocked_grid):
        """Test that an unreachable exit gives None."""
        assert a_star_search(blocked_grid) is None

    def test_looped_maze_matches_bfs_length(self, looped_grid):
        """Test that A* finds a shortest path on a grid with a loop."""
        path = a_star_search(looped_grid)
        assert_valid_path(looped_grid, path)
        assert len(path) == len(breadth_first_search(looped_grid))

    def test_open_room_matches_bfs_length(self):
        """Test optimality on an open room with many equal routes."""
        rows = ["XSXXXXXXX"] + ["X.......X"] * 7 + ["XXXXXXXEX"]
        grid = Grid.from_rows(rows)
        assert len(a_star_search(grid)) == len(breadth_first_search(grid))

    def test_does_not_gate_on_queue_membership(self, looped_grid, monkeypatch):
        """Test that A* re-enqueues on improvement instead of checking membership."""

        def fail(self, element):
            raise AssertionError("A* should not call contains()")

        monkeypatch.setattr(PriorityQueue, "contains", fail)
        assert len(a_star_search(looped_grid)) == 11

    def test_manhattan_distance(self):
        """Test the heuristic."""
        assert manhattan_distance((0, 1), (4, 3)) == 6
        assert manhattan_distance((2, 2), (2, 2)) == 0

    def test_reconstruct_path(self):
        """Test walking predecessor links back to the start."""
        came_from = {(1, 1): (0, 1), (1, 2): (1, 1)}
        assert reconstruct_path(came_from, (1, 2)) == [(0, 1), (1, 1), (1, 2)]


class TestSolverProperties:
    """Properties shared by every solver on generated mazes."""

    @pytest.mark.parametrize("seed", range(8))
    def test_paths_valid_and_bfs_optimal(self, seed):
        """Test validity and relative path lengths on random mazes."""
        grid = generate_maze(31, rng=random.Random(seed))
        bfs = breadth_first_search(grid)
        dfs = depth_first_search(grid)
        astar = a_star_search(grid)

        for path in (bfs, dfs, astar):
            assert_valid_path(grid, path)
        assert len(bfs) <= len(dfs)
        assert len(bfs) == len(astar)

    def test_perfect_maze_has_one_route(self, seeded_grid):
        """Test that every solver finds the same path through a perfect maze."""
        bfs = breadth_first_search(seeded_grid)
        assert depth_first_search(seeded_grid) == bfs
        assert a_star_search(seeded_grid) == bfs

    def test_no_path_agrees_across_solvers(self, blocked_grid):
        """Test that when BFS finds nothing, neither does anyone else."""
        for solver in PATHFINDERS.values():
            assert solver(blocked_grid, None, None) is None


class TestSolve:
    """Tests for solve dispatch."""

    def test_solve_by_name(self, fixed_grid):
        """Test that each name dispatches to its solver."""
        assert solve(fixed_grid, "bfs") == breadth_first_search(fixed_grid)
        assert solve(fixed_grid, "dfs") == depth_first_search(fixed_grid)
        assert solve(fixed_grid, "astar") == a_star_search(fixed_grid)

    def test_unknown_algorithm_falls_back_to_bfs(self, fixed_grid, caplog):
        """Test that unknown names use BFS and log a warning."""
        with caplog.at_level(logging.WARNING):
            assert solve(fixed_grid, "dijkstra") == breadth_first_search(fixed_grid)
        assert "Unknown algorithm 'dijkstra'" in caplog.text

    def test_resolve_algorithm(self):
        """Test algorithm name normalization."""
        assert resolve_algorithm("ASTAR") == "astar"
        assert resolve_algorithm(" dfs ") == "dfs"
        assert resolve_algorithm(None) == "bfs"
        assert resolve_algorithm("") == "bfs"


class TestLargeOpenGrid:
    """Solvers on the largest open room a client can send."""

    @staticmethod
    def _open_room(size: int) -> Grid:
        rows = ["XS" + "X" * (size - 2)]
        rows += ["X" + "." * (size - 2) + "X"] * (size - 2)
        rows += ["X" * (size - 2) + "EX"]
        return Grid.from_rows(rows)

    @pytest.mark.parametrize("solver", [breadth_first_search, depth_first_search])
    def test_open_room_memory_stays_small(self, solver):
        """Test that long paths do not copy their prefix on every step."""
        grid = self._open_room(201)

        tracemalloc.start()
        try:
            path = solver(grid)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        assert_valid_path(grid, path)
        assert peak < 64 * 1024 * 1024

    def test_depth_first_walks_long_route(self):
        """Test that depth-first search on an open room snakes through most cells."""
        grid = self._open_room(101)
        path = depth_first_search(grid)

        assert_valid_path(grid, path)
        assert len(path) > len(breadth_first_search(grid))


def test_unroll_path():
    """Test expanding a linked path node."""
    node = ((1, 2), ((1, 1), ((0, 1), None)))
    assert unroll_path(node) == [(0, 1), (1, 1), (1, 2)]
