# 📄 File: plantcare_social/modules/community_social/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# The posts table.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy PostModel. likedBy and comment lists are JSON columns.
#
# 🔗 Dependencies:
# - SQLAlchemy
# - shared Base
#
# 🔄 Connected Modules / Calls From:
# - PostRepositoryImpl
# - migrations

"""
SQLAlchemy model for community posts.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from plantcare_social.shared.infrastructure.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PostModel(Base):
    __tablename__ = "posts"

    post_id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    email = Column(String(255), nullable=False, index=True)
    caption = Column(Text, nullable=False)
    image = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    like_count = Column(Integer, nullable=False, default=0)
    comment = Column(JSON, nullable=False, default=list)
    liked_by = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return f"<PostModel(post_id={self.post_id}, email={self.email})>"
