"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_race.main import app
from maze_race.core import Grid, generate_maze, parse_grid_text


# Fixed-order 5x5 maze: carving down, right, up, left with no shuffling
FIXED_MAZE = """XSXXX
X...X
X.X.X
X.X.X
XXXEX"""

# Exit walled off from the rest of the maze
BLOCKED_MAZE = """XSXXX
X...X
X.X.X
XXXXX
XXXEX"""

# 7x7 grid with a loop: two shortest routes around the central wall
LOOPED_MAZE = """XSXXXXX
X.....X
X.XXX.X
X.....X
X.XXX.X
X.....X
XXXXXEX"""


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def fixed_grid() -> Grid:
    """The fixed-order 5x5 maze."""
    return parse_grid_text(FIXED_MAZE)


@pytest.fixture
def blocked_grid() -> Grid:
    """A grid with no route from entrance to exit."""
    return parse_grid_text(BLOCKED_MAZE)


@pytest.fixture
def looped_grid() -> Grid:
    """An imperfect grid with more than one route."""
    return parse_grid_text(LOOPED_MAZE)


@pytest.fixture
def seeded_grid() -> Grid:
    """A reproducible 21x21 generated maze."""
    return generate_maze(21, rng=random.Random(1234))
