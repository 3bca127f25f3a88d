"""Maze Race API - Main FastAPI Application."""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from maze_race.config import get_settings
from maze_race.api.routes import maze

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("maze_race")


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Reject maze requests over the per-client limit with a 429."""
    client = request.client.host if request.client else "unknown"
    logger.warning(f"Rate limit {exc.detail} hit by {client} on {request.url.path}")
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many maze requests. Please slow down.",
            "limit": str(exc.detail),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log each request under a short request id.

    Maze routes leave a one-line outcome in ``request.state.maze_summary``
    (size, algorithm, steps) which is appended to the response log line.
    The id and the handling time are returned as X-Request-ID and
    X-Process-Time-Ms.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        request.state.maze_summary = None
        started = time.perf_counter()

        logger.info(f"[{request_id}] --> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"[{request_id}] <-- ERROR: {type(e).__name__}: {e} ({elapsed_ms:.2f}ms)"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        outcome = f" {request.state.maze_summary}" if request.state.maze_summary else ""
        logger.info(f"[{request_id}] <-- {response.status_code}{outcome} ({elapsed_ms:.2f}ms)")

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.2f}"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        f"Starting Maze Race API (default size {settings.default_maze_size}, "
        f"max size {settings.max_maze_size}, default algorithm {settings.default_algorithm})"
    )
    yield
    logger.info("Shutting down Maze Race API...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Perfect maze generation and pathfinding races",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = maze.limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware - configured based on environment
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


# Include routers
app.include_router(maze.router, prefix="/v1")
