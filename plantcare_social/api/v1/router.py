# 📄 File: plantcare_social/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The switchboard that connects every feature (accounts, chat, posts, follows,
# notifications, mail, AI help, plant diary) to its web address.
# 🧪 Purpose (Technical Summary):
# Aggregates all module routers under their path prefixes. Paths match the existing
# mobile client: /auth, /chat, /follow, /posts, /notifications, /mailer, /ai, /plants.
# 🔗 Dependencies:
# FastAPI APIRouter, every module's presentation.api.v1 router
# 🔄 Connected Modules / Calls From:
# plantcare_social.main

import logging

from fastapi import APIRouter

from plantcare_social.modules.ai_smart_features.presentation.api.v1.ai_chat import ai_router
from plantcare_social.modules.community_social.presentation.api.v1.follow import follow_router
from plantcare_social.modules.community_social.presentation.api.v1.posts import posts_router
from plantcare_social.modules.notification_communication.presentation.api.v1.chat import chat_router
from plantcare_social.modules.notification_communication.presentation.api.v1.mailer import mailer_router
from plantcare_social.modules.notification_communication.presentation.api.v1.notifications import (
    notifications_router,
)
from plantcare_social.modules.plant_management.presentation.api.v1.plants import plants_router
from plantcare_social.modules.user_management.presentation.api.v1.auth import auth_router

from .health import health_router

logger = logging.getLogger(__name__)

ROUTE_PREFIXES = {
    "auth": "/auth",
    "chat": "/chat",
    "follow": "/follow",
    "posts": "/posts",
    "notifications": "/notifications",
    "mailer": "/mailer",
    "ai": "/ai",
    "plants": "/plants",
}

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health"])

for name, router, tag in (
    ("auth", auth_router, "Authentication"),
    ("chat", chat_router, "Chat"),
    ("follow", follow_router, "Follow"),
    ("posts", posts_router, "Posts"),
    ("notifications", notifications_router, "Notifications"),
    ("mailer", mailer_router, "Mailer"),
    ("ai", ai_router, "AI Chat"),
    ("plants", plants_router, "Plants"),
):
    api_v1_router.include_router(router, prefix=ROUTE_PREFIXES[name], tags=[tag])
    logger.debug(f"{tag} router mounted at {ROUTE_PREFIXES[name]}")
