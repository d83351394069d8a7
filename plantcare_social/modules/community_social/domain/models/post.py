# 📄 File: plantcare_social/modules/community_social/domain/models/post.py
# 🧭 Purpose (Layman Explanation):
# A shared plant photo with its caption, likes and comments.
#
# 🧪 Purpose (Technical Summary):
# Post domain model with like toggling. The like count never drops below zero.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - PostService
# - PostRepositoryImpl
# - posts routes

"""
Post domain model.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Post(BaseModel):
    """
    A shared photo with caption.

    `liked_by` holds the identities that currently like the post and is the
    source of truth for like toggling; `like_count` never goes below zero.
    Comments are free-form records kept in order.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    post_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="id")
    email: str
    caption: str
    image: str
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    like_count: int = 0
    comment: List[Any] = Field(default_factory=list)
    liked_by: List[str] = Field(default_factory=list)

    def is_liked_by(self, identity: str) -> bool:
        return identity in self.liked_by

    def toggle_like(self, identity: str) -> bool:
        """
        Flip the like of `identity`.

        Returns:
            bool: True if the post is now liked by identity
        """
        if self.is_liked_by(identity):
            self.liked_by = [liker for liker in self.liked_by if liker != identity]
            self.like_count = max(0, self.like_count - 1)
            return False

        self.liked_by = [*self.liked_by, identity]
        self.like_count = self.like_count + 1
        return True
