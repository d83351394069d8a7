# 📄 File: plantcare_social/modules/community_social/presentation/api/v1/posts.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the community feed: read posts, share one, like, comment,
# edit the caption, delete.
#
# 🧪 Purpose (Technical Summary):
# Post endpoints. Creating a post commits it, responds 201 and schedules the
# broadcast notification fan-out as a detached background job; a fan-out failure is
# logged and never changes the response. Likes schedule a directed update to the author.
#
# 🔗 Dependencies:
# - PostService, PostRepositoryImpl
# - NotificationFanout via app state, shared.core.background.run_detached
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.api.v1.router (mounted under /posts)

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.modules.notification_communication.domain.services.fanout import NotificationFanout
from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.presentation.dependencies import get_current_user
from plantcare_social.shared.core.background import run_detached
from plantcare_social.shared.core.dependencies import get_notification_fanout
from plantcare_social.shared.infrastructure.database.session import get_db_session

from ....domain.services.post_service import PostService
from ....infrastructure.database.post_repository_impl import PostRepositoryImpl
from ..schemas.post_schemas import CommentsRequest, CreatePostRequest, UpdateCaptionRequest

logger = logging.getLogger(__name__)

posts_router = APIRouter()


def get_post_service(db: AsyncSession = Depends(get_db_session)) -> PostService:
    return PostService(PostRepositoryImpl(db))


@posts_router.get("/getposts", summary="All posts, newest first")
async def get_posts(service: PostService = Depends(get_post_service)):
    return {"success": True, "posts": await service.list_posts()}


@posts_router.post("/addPost", status_code=status.HTTP_201_CREATED, summary="Share a new post")
async def add_post(
    payload: CreatePostRequest,
    background_tasks: BackgroundTasks,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db_session),
    fanout: NotificationFanout = Depends(get_notification_fanout),
):
    post = await service.create(
        author_email=current_user.email,
        caption=payload.caption,
        image=payload.image,
        date=payload.date,
        comments=payload.comment,
    )
    await db.commit()

    background_tasks.add_task(
        run_detached, "post_notification", fanout.notify_post, post.post_id, post.email, post.caption
    )
    return {"success": True, "message": "Post added successfully", "post": post}


@posts_router.delete("/delete/{post_id}", summary="Delete own post")
async def delete_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db_session),
):
    await service.delete(post_id, current_user.email)
    await db.commit()
    return {"success": True, "message": "Post deleted successfully"}


@posts_router.put("/like/{post_id}", summary="Like or unlike a post")
async def toggle_like(
    post_id: str,
    background_tasks: BackgroundTasks,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db_session),
    fanout: NotificationFanout = Depends(get_notification_fanout),
):
    post, liked = await service.toggle_like(post_id, current_user.email)
    await db.commit()

    if liked:
        background_tasks.add_task(
            run_detached, "like_notification", fanout.notify_like, post.post_id, post.email, current_user.email
        )
    return {
        "success": True,
        "message": "Post liked" if liked else "Post unliked",
        "post": post,
        "liked": liked,
    }


@posts_router.put("/comment/{post_id}", summary="Replace the comment list")
async def set_comments(
    post_id: str,
    payload: CommentsRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db_session),
):
    post = await service.set_comments(post_id, payload.comment)
    await db.commit()
    return {"success": True, "message": "Comment added", "post": post}


@posts_router.delete("/comment/{post_id}/{comment_index}", summary="Delete a comment by position")
async def delete_comment(
    post_id: str,
    comment_index: str,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db_session),
):
    post = await service.delete_comment(post_id, comment_index)
    await db.commit()
    return {"success": True, "message": "Comment deleted", "post": post}


@posts_router.put("/update/{post_id}", summary="Edit own caption")
async def update_caption(
    post_id: str,
    payload: UpdateCaptionRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db_session),
):
    post = await service.update_caption(post_id, current_user.email, payload.caption)
    await db.commit()
    return {"success": True, "post": post}


@posts_router.get("/{post_id}", summary="Single post")
async def get_post(post_id: str, service: PostService = Depends(get_post_service)):
    return {"success": True, "post": await service.get(post_id)}
