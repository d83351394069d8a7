# 📄 File: plantcare_social/modules/community_social/presentation/api/schemas/post_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what creating a post, editing a caption or changing comments needs.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request models for post endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/posts.py

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Caption and image are validated by the service so missing ones map to InvalidInput."""

    caption: Optional[str] = Field(None, max_length=2200)
    # URL of an already-uploaded image
    image: Optional[str] = None
    date: Optional[datetime] = None
    comment: List[Any] = Field(default_factory=list)


class CommentsRequest(BaseModel):
    comment: List[Any] = Field(default_factory=list)


class UpdateCaptionRequest(BaseModel):
    caption: Optional[str] = Field(None, max_length=2200)
