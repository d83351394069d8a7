# 📄 File: plantcare_social/modules/community_social/infrastructure/database/post_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, edits and removes posts in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PostRepository. Mutations go through update().values
# on the request session and are committed by the route.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - Post domain model
#
# 🔄 Connected Modules / Calls From:
# - PostService (via posts routes)

import logging
from typing import Any, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.post import Post
from ...domain.repositories.post_repository import PostRepository
from .models import PostModel

logger = logging.getLogger(__name__)


class PostRepositoryImpl(PostRepository):
    """
    SQLAlchemy implementation of the PostRepository interface.

    List columns are always written whole through UPDATE statements; in-place
    mutation of a loaded JSON value would not be flushed.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, post: Post) -> Post:
        model = PostModel(
            post_id=post.post_id,
            email=post.email,
            caption=post.caption,
            image=post.image,
            date=post.date,
            like_count=post.like_count,
            comment=list(post.comment),
            liked_by=list(post.liked_by),
        )
        self._session.add(model)
        await self._session.flush()
        return self._model_to_domain(model)

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        result = await self._session.execute(
            select(PostModel).where(PostModel.post_id == post_id).execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def list_all(self) -> List[Post]:
        result = await self._session.execute(select(PostModel).order_by(PostModel.date.desc()))
        return [self._model_to_domain(model) for model in result.scalars()]

    async def delete(self, post_id: str) -> bool:
        result = await self._session.execute(
            delete(PostModel).where(PostModel.post_id == post_id).execution_options(synchronize_session=False)
        )
        return bool(result.rowcount)

    async def save_likes(self, post: Post) -> None:
        await self._update(post.post_id, liked_by=list(post.liked_by), like_count=post.like_count)

    async def save_comments(self, post_id: str, comments: List[Any]) -> None:
        await self._update(post_id, comment=list(comments))

    async def save_caption(self, post_id: str, caption: str) -> None:
        await self._update(post_id, caption=caption)

    async def _update(self, post_id: str, **values: Any) -> None:
        await self._session.execute(
            update(PostModel)
            .where(PostModel.post_id == post_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

    def _model_to_domain(self, model: PostModel) -> Post:
        return Post(
            post_id=model.post_id,
            email=model.email,
            caption=model.caption,
            image=model.image,
            date=model.date,
            like_count=model.like_count or 0,
            comment=list(model.comment or []),
            liked_by=list(model.liked_by or []),
        )
