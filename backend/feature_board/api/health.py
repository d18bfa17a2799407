"""
Health probes for the board backend, mounted under /api.

/health and /health/ready depend on the document store answering a ping;
/health/live only reports that the process serves requests.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Depends

from ..core.config import Settings, get_settings
from ..database.mongodb import MongoDB
from .dependencies.board_deps import get_mongodb

logger = structlog.get_logger()

router = APIRouter()


def _is_connected(mongodb_status: dict[str, Any]) -> bool:
    return bool(mongodb_status.get("connected", False))


@router.get("/health")
async def health_check(
    mongodb: MongoDB = Depends(get_mongodb),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """
    Full status report.

    Always answers 200; `status` is "degraded" while MongoDB is unreachable.
    """
    mongodb_status = await mongodb.health_check()
    connected = _is_connected(mongodb_status)

    if not connected:
        logger.warning("MongoDB not reachable from health check", **mongodb_status)

    return {
        "status": "ok" if connected else "degraded",
        "environment": settings.environment,
        "dependencies": {"mongodb": mongodb_status},
        "configuration": {
            "database_name": settings.database_name,
            "board_id": settings.board_id,
            "identity_mode": settings.identity_mode,
        },
    }


@router.get("/health/mongodb")
async def mongodb_health(mongodb: MongoDB = Depends(get_mongodb)) -> dict[str, Any]:
    """Raw MongoDB ping result."""
    return await mongodb.health_check()


@router.get("/health/ready")
async def readiness_check(mongodb: MongoDB = Depends(get_mongodb)) -> dict[str, Any]:
    """Ready once MongoDB answers."""
    ready = _is_connected(await mongodb.health_check())
    return {"ready": ready, "dependencies": {"mongodb": ready}}


@router.get("/health/live")
async def liveness_check() -> dict[str, Any]:
    return {"alive": True, "status": "ok"}
