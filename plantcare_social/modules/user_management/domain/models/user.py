# 📄 File: plantcare_social/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in our plant care community: their name, email, picture,
# and the lists of people they follow and who follow them.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for the User entity. The email is the stable identity used
# as routing key for live channels and as foreign key on chats, notifications and posts.
# The password hash never leaves the domain layer.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid
# 🔄 Connected Modules / Calls From:
# identity_verifier.py, auth_service.py, user_repository.py, follow graph service,
# notification fan-out (sender display names, broadcast recipients)

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """
    User domain model representing a plant care community member.

    Fields:
    - user_id: Unique identifier carried in issued credentials
    - email: Identity, unique and immutable once assigned
    - name, age, gender, user_type, profile_image_url: Profile data
    - following / followers: Redundant follow edge lists kept mutually consistent
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    user_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="id")
    name: str = ""
    email: str
    age: Optional[int] = None
    gender: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="type")
    profile_image_url: str = ""
    password_hash: str = Field(default="", exclude=True, repr=False)
    following: List[str] = Field(default_factory=list)
    followers: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def display_name(self) -> str:
        """Name shown to other users, falling back to the email."""
        return self.name or self.email

    def is_following(self, identity: str) -> bool:
        return identity in self.following

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize for API responses (camelCase, no credentials)."""
        return self.model_dump(by_alias=True, mode="json")
