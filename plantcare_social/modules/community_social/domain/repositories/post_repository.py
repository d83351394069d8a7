# 📄 File: plantcare_social/modules/community_social/domain/repositories/post_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists the things any post storage must be able to do.
#
# 🧪 Purpose (Technical Summary):
# Abstract PostRepository interface.
#
# 🔗 Dependencies:
# - abc
# - Post domain model
#
# 🔄 Connected Modules / Calls From:
# - PostService
# - PostRepositoryImpl

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models.post import Post


class PostRepository(ABC):
    """Repository interface for posts."""

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Persist a new post."""

    @abstractmethod
    async def get_by_id(self, post_id: str) -> Optional[Post]:
        """Fresh read of one post."""

    @abstractmethod
    async def list_all(self) -> List[Post]:
        """Every post, newest first."""

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete a post. False if it did not exist."""

    @abstractmethod
    async def save_likes(self, post: Post) -> None:
        """Write liked_by and like_count of the post."""

    @abstractmethod
    async def save_comments(self, post_id: str, comments: List[Any]) -> None:
        """Replace the ordered comment list."""

    @abstractmethod
    async def save_caption(self, post_id: str, caption: str) -> None:
        """Replace the caption."""
