"""
Health check endpoints
"""

import asyncio
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from app.database import get_connection
from app.dependencies.services import get_services
from app.services.container import ServiceContainer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/db")
async def db_health_check(conn=Depends(get_connection)):
    """Database connectivity check"""
    try:
        await conn.fetchval("SELECT 1")
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.warning("db_health_failed error=%s", e.__class__.__name__)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"status": "unhealthy", "database": "unavailable"},
        )


@router.get("/health/ready")
async def readiness_check(
    conn=Depends(get_connection),
    services: ServiceContainer = Depends(get_services),
):
    """
    Kubernetes-style readiness probe.
    Returns 200 if all dependencies are healthy, 503 otherwise.
    """
    checks = {}
    all_healthy = True

    # Database check with timeout
    try:
        await asyncio.wait_for(conn.fetchval("SELECT 1"), timeout=5.0)
        checks["database"] = "healthy"
    except asyncio.TimeoutError:
        checks["database"] = "timeout"
        all_healthy = False
    except Exception as e:
        logger.warning("readiness_db_failed error=%s", e.__class__.__name__)
        checks["database"] = "unhealthy"
        all_healthy = False

    response_data = {
        "status": "healthy" if all_healthy else "unhealthy",
        "checks": checks,
        "cache": services.cache.stats(),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if all_healthy:
        return response_data
    else:
        return JSONResponse(status_code=503, content=response_data)
