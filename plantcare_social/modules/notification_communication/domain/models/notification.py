# 📄 File: plantcare_social/modules/notification_communication/domain/models/notification.py
# 🧭 Purpose (Layman Explanation):
# Describes the little alerts people get: "you have a new message", "someone posted",
# "someone liked your post". Each kind of alert knows what it points at.
# 🧪 Purpose (Technical Summary):
# Tagged notification variants discriminated on `kind` (serialized as "type").
# The wire form is the same record pushed live as `notification:new` and returned
# by the notifications API: id, userId, type, title, message, relatedId,
# relatedEmail, read, timestamp.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Fan-out engine, notification repository, notifications API, live channel

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NotificationKind(str, Enum):
    MESSAGE = "message"
    POST = "post"
    UPDATE = "update"


class NotificationBase(BaseModel):
    """Fields shared by every notification kind."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    notification_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="id")
    # Recipient identity
    user_id: str
    title: str
    body: str = Field(..., alias="message")
    related_id: Optional[str] = None
    related_email: Optional[str] = None
    read: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class MessageNotification(NotificationBase):
    """A direct message arrived. relatedId is the chat id, relatedEmail the sender."""

    kind: Literal[NotificationKind.MESSAGE] = Field(NotificationKind.MESSAGE, alias="type")
    related_id: str
    related_email: str


class PostNotification(NotificationBase):
    """Someone shared a post. relatedId is the post id, relatedEmail the author."""

    kind: Literal[NotificationKind.POST] = Field(NotificationKind.POST, alias="type")
    related_id: str
    related_email: str


class UpdateNotification(NotificationBase):
    """Activity on the recipient's own content or profile (likes, follows)."""

    kind: Literal[NotificationKind.UPDATE] = Field(NotificationKind.UPDATE, alias="type")


NOTIFICATION_TYPES: Dict[NotificationKind, Type[NotificationBase]] = {
    NotificationKind.MESSAGE: MessageNotification,
    NotificationKind.POST: PostNotification,
    NotificationKind.UPDATE: UpdateNotification,
}


def preview(text: str, length: int = 50) -> str:
    """First `length` characters of text, with an ellipsis when cut."""
    return f"{text[:length]}..." if len(text) > length else text
