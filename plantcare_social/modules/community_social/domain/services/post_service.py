# 📄 File: plantcare_social/modules/community_social/domain/services/post_service.py
# 🧭 Purpose (Layman Explanation):
# Everything people can do with posts: share one, like or unlike it, comment,
# fix the caption, or take it down.
# 🧪 Purpose (Technical Summary):
# Domain service for posts. Every mutation re-reads the current row before writing
# (last write wins per field); like toggling is idempotent per identity.
# Notifications are not sent here; routes schedule fan-out after commit.
# 🔗 Dependencies:
# Post model and repository, shared exceptions
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/posts.py

import logging
from datetime import datetime
from typing import Any, List, Optional, Tuple

from plantcare_social.shared.core.exceptions import AuthorizationError, NotFoundError, ValidationError

from ..models.post import Post
from ..repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class PostService:

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def get(self, post_id: str) -> Post:
        post = await self.post_repository.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found", resource_type="post", resource_id=post_id)
        return post

    async def list_posts(self) -> List[Post]:
        return await self.post_repository.list_all()

    async def create(
        self,
        author_email: str,
        caption: Optional[str],
        image: Optional[str],
        date: Optional[datetime] = None,
        comments: Optional[List[Any]] = None,
    ) -> Post:
        """
        Raises:
            ValidationError: Missing caption or image
        """
        caption = (caption or "").strip()
        image = (image or "").strip()
        if not caption:
            raise ValidationError("Caption is required", field="caption")
        if not image:
            raise ValidationError("Image is required", field="image")

        post = Post(email=author_email, caption=caption, image=image, comment=list(comments or []))
        if date is not None:
            post.date = date

        created = await self.post_repository.create(post)
        logger.info(f"Post {created.post_id} created by {author_email}")
        return created

    async def delete(self, post_id: str, actor_email: str) -> None:
        post = await self.get(post_id)
        self._ensure_author(post, actor_email)
        await self.post_repository.delete(post_id)
        logger.info(f"Post {post_id} deleted by {actor_email}")

    async def toggle_like(self, post_id: str, actor_email: str) -> Tuple[Post, bool]:
        """
        Like the post, or unlike it if the actor already likes it.

        Returns:
            (updated post, liked)
        """
        post = await self.get(post_id)
        liked = post.toggle_like(actor_email)
        await self.post_repository.save_likes(post)
        return post, liked

    async def set_comments(self, post_id: str, comments: List[Any]) -> Post:
        post = await self.get(post_id)
        await self.post_repository.save_comments(post_id, comments)
        post.comment = list(comments)
        return post

    async def delete_comment(self, post_id: str, raw_index: str) -> Post:
        """
        Raises:
            ValidationError: Index is not an integer within the comment list
        """
        post = await self.get(post_id)
        try:
            index = int(raw_index)
        except (TypeError, ValueError):
            raise ValidationError("Invalid comment index", field="commentIndex", value=raw_index)
        if index < 0 or index >= len(post.comment):
            raise ValidationError("Invalid comment index", field="commentIndex", value=raw_index)

        comments = [c for i, c in enumerate(post.comment) if i != index]
        await self.post_repository.save_comments(post_id, comments)
        post.comment = comments
        return post

    async def update_caption(self, post_id: str, actor_email: str, caption: Optional[str]) -> Post:
        caption = (caption or "").strip()
        if not caption:
            raise ValidationError("Caption is required", field="caption")

        post = await self.get(post_id)
        self._ensure_author(post, actor_email)
        await self.post_repository.save_caption(post_id, caption)
        post.caption = caption
        return post

    @staticmethod
    def _ensure_author(post: Post, actor_email: str) -> None:
        if post.email != actor_email:
            raise AuthorizationError(
                "Only the author can change this post",
                resource_type="post",
                resource_id=post.post_id,
            )
