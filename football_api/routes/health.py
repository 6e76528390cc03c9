"""Health check endpoints."""
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from football_api import __version__
from football_api.app_logging import get_logger
from football_api.deps import get_request_id
from football_api.storage.base import Base

logger = get_logger(__name__)

# Mounted without a prefix: load balancers and the old clients poll /health
liveness_router = APIRouter()
router = APIRouter()


@liveness_router.get("/health")
async def liveness() -> Dict[str, str]:
    """Fixed payload; no dependencies are touched."""
    return {"status": "healthy"}


@router.get("/health")
async def health(request: Request, request_id: str = Depends(get_request_id)) -> Dict[str, Any]:
    """Detailed health check: database reachability and schema."""
    database = request.app.state.database
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "environment": request.app.state.settings.ENVIRONMENT,
        "services": {
            "api": "healthy",
            "database": "unknown",
        },
        "tables": {},
    }

    if database.check_connection():
        health_status["services"]["database"] = "healthy"
        health_status["tables"] = {name: database.table_exists(name) for name in Base.metadata.tables}
        if not all(health_status["tables"].values()):
            health_status["status"] = "degraded"
    else:
        health_status["services"]["database"] = "unhealthy"
        health_status["status"] = "degraded"

    status_value = health_status["status"]
    logger.debug(f"Health check completed - {status_value}", extra={"request_id": request_id})
    return health_status
