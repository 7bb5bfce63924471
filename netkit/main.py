"""FastAPI application for the network toolset.

Runs directly on Uvicorn (``uvicorn netkit.main:app``) and serves:
- /api/subnet-calc: IPv4 subnet calculator
- /api/port-lookup: well-known port and service lookup
- /api/hello and /api/v1/health*: health checks

Environment Variables:
    CORS Configuration:
        ALLOWED_ORIGINS: Comma or whitespace separated list of allowed origins
                         If not set or empty, the public toolset sites are allowed
                         Example: https://example.com,http://localhost:5173

        ALLOWED_ORIGIN_SUFFIXES: Host suffixes allowed for preview deployments
                                 Example: .lovable.dev

    LOG_LEVEL: Logging level name (default: INFO)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import get_cors_origin_regex, get_cors_origins, get_log_level
from .routers import health, ports, subnets

logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application, reading CORS settings from the environment."""
    app = FastAPI(
        title="Network Toolset API",
        description="IPv4 subnet calculator and well-known port lookup",
        version=__version__,
        docs_url="/api/v1/docs",  # Swagger UI
        redoc_url="/api/v1/redoc",  # ReDoc
        openapi_url="/api/v1/openapi.json",
    )

    cors_origins = get_cors_origins()
    cors_origin_regex = get_cors_origin_regex()
    logger.info(f"CORS: Allowed origins: {', '.join(cors_origins)}")
    if cors_origin_regex:
        logger.info(f"CORS: Allowed origin pattern: {cors_origin_regex}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_origin_regex=cors_origin_regex,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.include_router(health.router)
    app.include_router(subnets.router)
    app.include_router(ports.router)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Log unexpected failures and return a generic 500."""
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"detail": "Server error."})

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Network Toolset API",
            "version": __version__,
            "docs": "/api/v1/docs",
            "openapi": "/api/v1/openapi.json",
            "health": "/api/v1/health",
        }

    return app


app = create_app()
