# 📄 File: plantcare_social/modules/notification_communication/domain/models/chat.py
# 🧭 Purpose (Layman Explanation):
# A single direct message and the one-line summary of a conversation.
#
# 🧪 Purpose (Technical Summary):
# ChatMessage and ConversationSummary pydantic models with camelCase aliases.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - ConversationService
# - ChatRepositoryImpl
# - NotificationFanout

"""
Chat domain models: direct messages and the per-partner conversation summary.
"""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatMessage(BaseModel):
    """
    One direct message between two identities.

    Owned jointly by sender and receiver; `read` flips when the receiver
    opens the thread. Never deleted.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chat_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="id")
    sender_email: str
    receiver_email: str
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False

    def partner_of(self, identity: str) -> str:
        """The other party of this message from the point of view of `identity`."""
        return self.receiver_email if self.sender_email == identity else self.sender_email


class ConversationSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str
    name: str = "Unknown"
    profile_image_url: str = ""
    last_message: str
    timestamp: datetime
    unread_count: int = 0
