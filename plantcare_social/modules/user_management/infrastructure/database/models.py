# 📄 File: plantcare_social/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how user accounts are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the users table. Follow edges are stored redundantly
# as JSON lists of emails on both endpoints of the edge.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - plantcare_social.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations (schema generation)

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from plantcare_social.shared.infrastructure.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    """SQLAlchemy model for user accounts and their follow lists."""
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(120), nullable=False, default="")
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    age = Column(Integer, nullable=True)
    gender = Column(String(32), nullable=True)
    user_type = Column("type", String(32), nullable=True)
    profile_image_url = Column(Text, nullable=False, default="")
    following = Column(JSON, nullable=False, default=list)
    followers = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<UserModel(user_id={self.user_id}, email={self.email})>"
