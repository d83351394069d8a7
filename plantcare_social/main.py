# 📄 File: plantcare_social/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Plant Care social app, connects all the
# parts together (database, live notifications, AI helper, email) and makes sure
# everything is ready before the first phone connects.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point. The lifespan owns every
# process-lifetime service: database engine and session factory, channel registry,
# realtime event bus, notification fan-out engine and the external API clients.
# Registers middleware, exception handlers, HTTP routers and the /ws endpoint.
#
# 🔗 Dependencies:
# - FastAPI, slowapi, uvicorn
# - plantcare_social.shared (config, core, infrastructure, realtime, utils)
# - All module routers via plantcare_social.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup (`plantcare-social` script)
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from plantcare_social.api.middleware.logging import RequestLoggingMiddleware
from plantcare_social.api.realtime import realtime_router
from plantcare_social.api.v1.router import api_v1_router
from plantcare_social.modules.notification_communication.domain.services.fanout import NotificationFanout
from plantcare_social.shared.config.settings import get_settings
from plantcare_social.shared.core.exceptions import PlantCareException
from plantcare_social.shared.core.rate_limiter import limiter
from plantcare_social.shared.infrastructure.database.connection import close_database, init_database
from plantcare_social.shared.infrastructure.database.session import session_manager
from plantcare_social.shared.infrastructure.external_apis.groq_client import GroqClient
from plantcare_social.shared.infrastructure.external_apis.mail_client import SendGridClient
from plantcare_social.shared.realtime.event_bus import RealtimeEventBus
from plantcare_social.shared.realtime.registry import ChannelRegistry
from plantcare_social.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup order: logging, database, sessions, realtime services, API clients.
    Shutdown releases them in reverse.
    """
    settings = get_settings()
    setup_logging(settings)
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, {"environment": settings.ENVIRONMENT})

    await init_database(settings)
    session_manager.initialize()
    logger.info("✅ Database and session manager initialized")

    registry = ChannelRegistry()
    event_bus = RealtimeEventBus(registry)
    app.state.channel_registry = registry
    app.state.event_bus = event_bus
    app.state.notification_fanout = NotificationFanout(
        session_manager,
        event_bus,
        preview_length=settings.NOTIFICATION_PREVIEW_LENGTH,
    )
    logger.info("✅ Realtime channel registry and event bus ready")

    app.state.ai_client = GroqClient(
        api_key=settings.GROQ_API_KEY,
        base_url=settings.GROQ_API_URL,
        model=settings.GROQ_MODEL,
        temperature=settings.AI_TEMPERATURE,
        timeout=settings.AI_TIMEOUT_SECONDS,
    )
    app.state.mail_client = SendGridClient(
        api_key=settings.SENDGRID_API_KEY,
        base_url=settings.SENDGRID_API_URL,
        from_email=settings.SENDGRID_FROM_EMAIL,
        from_name=settings.SENDGRID_FROM_NAME,
        timeout=settings.MAIL_TIMEOUT_SECONDS,
    )
    if not settings.ai_configured:
        logger.warning("GROQ_API_KEY is not set; AI endpoints will answer with an apology")

    logger.info("✅ Plant Care social API startup complete")

    try:
        yield
    finally:
        log_shutdown_event(settings.APP_NAME, {"live_connections": registry.connection_count})

        await app.state.ai_client.close()
        await app.state.mail_client.close()
        session_manager.close()
        await close_database()
        logger.info("✅ Plant Care social API shutdown complete")


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(PlantCareException)
    async def plant_care_exception_handler(request: Request, exc: PlantCareException) -> JSONResponse:
        """Handle application exceptions with the uniform error body."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message} {exc.details}")
        body = exc.to_dict()
        body["error"]["request_id"] = getattr(request.state, "request_id", None)
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"field": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": {
                    "code": "INVALID_INPUT",
                    "message": "Request validation failed",
                    "details": {"errors": errors},
                    "request_id": getattr(request.state, "request_id", None),
                },
            },
        )

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle anything unexpected as a 500 without leaking internals."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": "An internal server error occurred",
                    "details": {"error_type": type(exc).__name__} if get_settings().DEBUG else {},
                    "request_id": getattr(request.state, "request_id", None),
                },
            },
        )


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_PREFIX)
    app.include_router(realtime_router)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "health_check": f"{settings.API_PREFIX}/health",
            "live_channel": "/ws",
            "time": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """Run the application with uvicorn (development and single-host deployments)."""
    settings = get_settings()
    uvicorn.run(
        "plantcare_social.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
