# 📄 File: plantcare_social/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The connection to the database and the per-request database sessions.
#
# 🧪 Purpose (Technical Summary):
# Exports the declarative Base, the engine manager and the session manager
# with the get_db_session dependency.
#
# 🔗 Dependencies:
# - SQLAlchemy asyncio (asyncpg, aiosqlite)
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (lifespan)
# - repositories
# - migrations/env.py

from .connection import Base, close_database, database_health_check, db_manager, init_database
from .session import DatabaseSessionManager, get_db_session, session_manager

__all__ = [
    "Base",
    "DatabaseSessionManager",
    "close_database",
    "database_health_check",
    "db_manager",
    "get_db_session",
    "init_database",
    "session_manager",
]
