"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazeGenerateRequest(BaseModel):
    """Schema for generating a new maze."""

    size: Optional[int] = Field(None, description="Side length, coerced to an odd value >= 3")
    seed: Optional[int] = Field(None, description="Seed for a reproducible maze")


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    col: int


class MazeResponse(BaseModel):
    """Schema for a generated maze."""

    size: int
    grid: list[str]
    entrance: MazePosition
    exit: MazePosition


class SolveRequest(BaseModel):
    """Schema for solving a maze with one algorithm."""

    grid: list[str] = Field(..., min_length=3)
    algorithm: Optional[str] = Field(None, description="bfs, dfs or astar; unknown names use bfs")


class SolveResponse(BaseModel):
    """Schema for a solve result."""

    algorithm: str
    found: bool
    steps: int
    path: list[tuple[int, int]]


class RaceRequest(BaseModel):
    """Schema for racing every algorithm on one maze."""

    grid: list[str] = Field(..., min_length=3)


class RaceResultItem(BaseModel):
    """Schema for one algorithm's race result."""

    algorithm: str
    time: float  # shared batch span in seconds
    own_time: float
    steps: int
    found: bool


class RaceResponse(BaseModel):
    """Schema for race results, in fixed algorithm order."""

    results: list[RaceResultItem]
    elapsed: float
    summary: list[str]


class AlgorithmListResponse(BaseModel):
    """Schema for the algorithm listing."""

    algorithms: list[str]
    default: str
