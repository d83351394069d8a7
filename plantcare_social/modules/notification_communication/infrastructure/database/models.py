# 📄 File: plantcare_social/modules/notification_communication/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# The chats and notifications tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ChatModel and NotificationModel. Identities are stored as emails,
# the routing key of live channels.
#
# 🔗 Dependencies:
# - SQLAlchemy
# - shared Base
#
# 🔄 Connected Modules / Calls From:
# - ChatRepositoryImpl
# - NotificationRepositoryImpl
# - migrations

"""
SQLAlchemy models for chats and notifications.

Identities are stored as emails, matching the routing key of live channels.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text

from plantcare_social.shared.infrastructure.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatModel(Base):
    __tablename__ = "chats"

    chat_id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    sender_email = Column(String(255), nullable=False, index=True)
    receiver_email = Column(String(255), nullable=False, index=True)
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    read = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_chats_receiver_read", "receiver_email", "read"),
    )

    def __repr__(self):
        return f"<ChatModel(chat_id={self.chat_id}, {self.sender_email} -> {self.receiver_email})>"


class NotificationModel(Base):
    __tablename__ = "notifications"

    notification_id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(String(255), nullable=False, index=True)
    kind = Column("type", String(16), nullable=False)
    title = Column(String(255), nullable=False)
    body = Column("message", Text, nullable=False)
    related_id = Column(String(36), nullable=True)
    related_email = Column(String(255), nullable=True)
    read = Column(Boolean, nullable=False, default=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index("ix_notifications_user_timestamp", "user_id", "timestamp"),
    )

    def __repr__(self):
        return f"<NotificationModel(notification_id={self.notification_id}, user_id={self.user_id})>"
