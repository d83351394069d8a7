# 📄 File: plantcare_social/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick checkup endpoint that says whether the app and its database are working
# and how many devices are currently listening for live notifications.
# 🧪 Purpose (Technical Summary):
# Liveness/health endpoint reporting database connectivity, live channel registry
# counters and uptime. Returns 503 when the database is unhealthy.
# 🔗 Dependencies:
# FastAPI, shared.infrastructure.database.connection, shared.realtime registry
# 🔄 Connected Modules / Calls From:
# plantcare_social.api.v1.router, load balancers, monitoring

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from plantcare_social.shared.config.settings import get_settings
from plantcare_social.shared.core.dependencies import get_channel_registry
from plantcare_social.shared.infrastructure.database.connection import database_health_check
from plantcare_social.shared.realtime.registry import ChannelRegistry
from plantcare_social.shared.utils.logging import log_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()

_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health", summary="Basic Health Check")
async def health_check(registry: ChannelRegistry = Depends(get_channel_registry)) -> JSONResponse:
    settings = get_settings()
    database = await database_health_check()
    log_health_check("database", database["status"])

    healthy = database["status"] == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": int((datetime.now(timezone.utc) - _app_start_time).total_seconds()),
            "components": {
                "database": database,
                "realtime": registry.stats(),
            },
        },
    )
