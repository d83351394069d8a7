# 📄 File: plantcare_social/modules/notification_communication/presentation/api/schemas/chat_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what sending a message or a verification email needs.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request models with camelCase aliases.
#
# 🔗 Dependencies:
# - pydantic (EmailStr via email-validator)
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/chat.py
# - presentation/api/v1/mailer.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class SendMessageRequest(BaseModel):
    """Both fields are checked by the service so a missing one maps to InvalidInput."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    receiver_email: Optional[str] = None
    message: Optional[str] = Field(None, max_length=5000)


class SendOtpRequest(BaseModel):
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=2000)
