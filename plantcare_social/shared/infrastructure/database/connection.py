# 📄 File: plantcare_social/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to our data storage
# and share a small pool of connections between all requests.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle: engine creation from settings (asyncpg pool in
# production, aiosqlite for local runs and tests), health checks, optional table
# creation from the declarative Base, and disposal on shutdown.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - plantcare_social/shared/config/settings.py (database configuration)
# - asyncpg / aiosqlite (async drivers)
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social/shared/infrastructure/database/session.py (session management)
# - plantcare_social/main.py (lifespan startup and shutdown)
# - plantcare_social/api/v1/health.py (database health)

import importlib
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)

# ORM modules that register tables on Base.metadata
MODEL_MODULES = (
    "plantcare_social.modules.user_management.infrastructure.database.models",
    "plantcare_social.modules.community_social.infrastructure.database.models",
    "plantcare_social.modules.notification_communication.infrastructure.database.models",
    "plantcare_social.modules.plant_management.infrastructure.database.models",
)


class Base(DeclarativeBase):
    """Declarative base shared by every module's ORM models."""


def import_model_modules() -> None:
    """Import every ORM module so Base.metadata knows all tables."""
    for module_path in MODEL_MODULES:
        importlib.import_module(module_path)


class DatabaseConnectionManager:
    """
    Owns the async engine for the process lifetime.
    Created in the application lifespan and disposed on shutdown.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    def _build_connection_params(self, settings) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        params: Dict[str, Any] = {
            "url": settings.database_url,
            "echo": settings.DEBUG,
        }
        if settings.is_sqlite:
            return params

        params.update({
            "pool_pre_ping": True,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "connect_args": {
                "server_settings": {"application_name": "plantcare_social"},
                "command_timeout": 60,
            },
        })
        return params

    async def initialize(self, settings) -> None:
        """Create the engine, verify connectivity and optionally create tables."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(**self._build_connection_params(settings))

        try:
            async with self._engine.begin() as conn:
                await conn.execute(self._health_check_query)
                if settings.DB_AUTO_CREATE:
                    import_model_modules()
                    await conn.run_sync(Base.metadata.create_all)
                    logger.info("Database tables ensured")
        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            await self._engine.dispose()
            self._engine = None
            raise

        logger.info("✅ Database connection initialized successfully")

    async def health_check(self) -> Dict[str, Any]:
        """Perform database health check and return structured status."""
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": timestamp,
            }

        try:
            async with self._engine.connect() as conn:
                await conn.execute(self._health_check_query)
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return {"status": "unhealthy", "error": str(e), "timestamp": timestamp}

        return {"status": "healthy", "timestamp": timestamp}

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(settings) -> None:
    """Initialize the global database connection manager."""
    await db_manager.initialize(settings)


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """Perform database health check."""
    return await db_manager.health_check()
