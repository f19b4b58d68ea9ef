"""FastAPI application entry point — wires everything together.

Usage:
    python -m edusphere.main

Creates tables (outside production), ensures the default admin exists,
seeds demo data into an empty store, then serves the REST API.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from edusphere import __version__
from edusphere.api import auth, school, users
from edusphere.api.errors import register_exception_handlers
from edusphere.config import settings
from edusphere.db.engine import async_session_factory, db_lifespan
from edusphere.db.seed import bootstrap

# ── Logging setup ────────────────────────────────────────────────────

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = logging.getLogger(__name__)
request_log = structlog.get_logger("edusphere.requests")

# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    logger.info("Starting EduSphere (env=%s)", settings.environment)

    async with db_lifespan():
        logger.info("Database initialized at %s", settings.db.database_url)

        async with async_session_factory() as db:
            await bootstrap(db)
        logger.info("Bootstrap data ready")

        app.state.started_at = datetime.now(UTC)
        try:
            yield
        finally:
            logger.info("Shutting down EduSphere...")

    logger.info("EduSphere shutdown complete")


# ── FastAPI app ──────────────────────────────────────────────────────

app = FastAPI(
    title="EduSphere API",
    description="School management backend: users, records, and audit trail",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.server.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log every request with its origin."""
    request_log.info(
        "request",
        method=request.method,
        path=request.url.path,
        origin=request.headers.get("origin", "Direct"),
    )
    return await call_next(request)


register_exception_handlers(app)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(school.router)


@app.get("/")
async def root() -> dict[str, str]:
    """Service banner for browser checks."""
    return {
        "status": "EduSphere Backend Running",
        "version": __version__,
        "instructions": "Use the API endpoints under /api",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "timestamp": datetime.now(UTC).isoformat(),
    }


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    uvicorn.run(
        "edusphere.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
