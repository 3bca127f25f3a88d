"""Maze routes for generating, solving and racing mazes."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from maze_race.api.deps import MazeServiceDep
from maze_race.config import get_settings
from maze_race.core import (
    Grid,
    InvalidMazeSizeError,
    MazeParseError,
    MazeValidationError,
    RACE_ORDER,
    format_race_results,
)
from maze_race.schemas.maze import (
    AlgorithmListResponse,
    MazeGenerateRequest,
    MazePosition,
    MazeResponse,
    RaceRequest,
    RaceResponse,
    RaceResultItem,
    SolveRequest,
    SolveResponse,
)
from maze_race.services.maze_service import MazeService, MazeSizeLimitError

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _parse_grid(service: MazeService, rows: list[str]) -> Grid:
    """Parse a supplied grid, mapping parser errors to 400."""
    try:
        return service.parse(rows)
    except (MazeParseError, MazeValidationError, MazeSizeLimitError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "/algorithms",
    response_model=AlgorithmListResponse,
)
async def list_algorithms() -> AlgorithmListResponse:
    """List the available algorithms in race order."""
    return AlgorithmListResponse(
        algorithms=list(RACE_ORDER),
        default=settings.default_algorithm,
    )


@router.post(
    "",
    response_model=MazeResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def create_maze(
    request: Request,
    maze_request: MazeGenerateRequest,
    service: MazeServiceDep,
) -> MazeResponse:
    """Generate a new perfect maze.

    Even sizes are bumped to the next odd size and sizes below 3 become 3.
    Sizes above the configured maximum are rejected.
    """
    try:
        grid = service.generate(size=maze_request.size, seed=maze_request.seed)
    except (InvalidMazeSizeError, MazeSizeLimitError) as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    request.state.maze_summary = f"generated {grid.size}x{grid.size} seed={maze_request.seed}"

    entrance_row, entrance_col = grid.entrance
    exit_row, exit_col = grid.exit
    return MazeResponse(
        size=grid.size,
        grid=grid.to_rows(),
        entrance=MazePosition(row=entrance_row, col=entrance_col),
        exit=MazePosition(row=exit_row, col=exit_col),
    )


@router.post(
    "/solve",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve_maze(
    request: Request,
    solve_request: SolveRequest,
    service: MazeServiceDep,
) -> SolveResponse:
    """Solve a maze with one algorithm.

    No path is not an error: the response has found=false and an empty path.
    """
    grid = _parse_grid(service, solve_request.grid)
    algorithm, path = await service.solve(grid, solve_request.algorithm)
    request.state.maze_summary = (
        f"{algorithm} on {grid.size}x{grid.size}: {len(path) if path else 0} steps"
    )

    return SolveResponse(
        algorithm=algorithm,
        found=path is not None,
        steps=len(path) if path else 0,
        path=path or [],
    )


@router.post(
    "/race",
    response_model=RaceResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def race_maze(
    request: Request,
    race_request: RaceRequest,
    service: MazeServiceDep,
) -> RaceResponse:
    """Race bfs, dfs and astar on the same maze.

    Every result reports the same batch time; own_time is each algorithm's
    individual run time.
    """
    grid = _parse_grid(service, race_request.grid)
    results = await service.race(grid)
    request.state.maze_summary = f"race on {grid.size}x{grid.size}: " + ", ".join(
        f"{r.algorithm}={r.steps}" for r in results
    )

    return RaceResponse(
        results=[RaceResultItem(**result.to_dict()) for result in results],
        elapsed=results[0].time if results else 0.0,
        summary=format_race_results(results),
    )
