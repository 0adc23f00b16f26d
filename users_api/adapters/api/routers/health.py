# users_api/adapters/api/routers/health.py
from typing import Dict

import structlog
from fastapi import APIRouter, Depends, Response, status

from users_api.adapters.api.dependencies import get_user_store
from users_api.core.ports.user_store import IUserStore
from users_api.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": settings.APP_NAME}


@router.get("/ready", status_code=status.HTTP_200_OK)
def readiness_probe(
    response: Response,
    store: IUserStore = Depends(get_user_store),
) -> Dict[str, str]:
    """
    Readiness Probe.
    Returns 503 Service Unavailable if the user store is not reachable.
    """
    health_status = {"storage": "down"}

    try:
        if store.health_check():
            health_status["storage"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="storage", error=str(e))

    if health_status["storage"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
