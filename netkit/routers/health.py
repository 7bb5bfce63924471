"""Health check endpoints.

- /api/hello: Simple ping with server time (kept for existing frontends)
- /api/v1/health: General health check
- /api/v1/health/ready: Readiness probe (can accept traffic?)
- /api/v1/health/live: Liveness probe (is the app running?)
"""

from datetime import UTC, datetime

from fastapi import APIRouter

from .. import __version__

router = APIRouter(tags=["health"])


@router.get("/api/hello")
async def hello():
    """Ping endpoint returning the current UTC time in ISO-8601."""
    return {"ok": True, "time": datetime.now(UTC).isoformat()}


@router.get("/api/v1/health")
async def health_check():
    """Health check endpoint.

    Returns:
        Simple status indicating the application is healthy
    """
    return {
        "status": "healthy",
        "service": "Network Toolset API",
        "version": __version__,
    }


@router.get("/api/v1/health/ready")
async def readiness_check():
    """Readiness check for container orchestrators.

    Both tools are pure lookups with no external dependencies, so the app is
    ready as soon as it is serving.
    """
    return {"status": "ready"}


@router.get("/api/v1/health/live")
async def liveness_check():
    """Liveness check. If this fails, the orchestrator restarts the container."""
    return {"status": "alive"}
