# 📄 File: plantcare_social/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for signing up, logging in and asking "who am I?".
#
# 🧪 Purpose (Technical Summary):
# FastAPI authentication endpoints returning JWT access tokens. The token is later
# accepted both in the Authorization header and in the live-channel register handshake.
#
# 🔗 Dependencies:
# - FastAPI router
# - AuthService, user repository, presentation dependencies
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.api.v1.router (mounted under /auth)

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.shared.infrastructure.database.session import get_db_session

from ....domain.models.user import User
from ....domain.services.auth_service import AuthService
from ....infrastructure.database.user_repository_impl import UserRepositoryImpl
from ...dependencies import get_current_user, get_user_repository
from ..schemas.auth_schemas import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

auth_router = APIRouter()


@auth_router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account",
    responses={409: {"description": "User already exists"}},
)
async def register(
    registration_data: RegisterRequest,
    user_repository: UserRepositoryImpl = Depends(get_user_repository),
    db: AsyncSession = Depends(get_db_session),
):
    user, token = await AuthService(user_repository).register(
        name=registration_data.name,
        email=registration_data.email,
        password=registration_data.password,
        age=registration_data.age,
        gender=registration_data.gender,
        user_type=registration_data.user_type,
        profile_image_url=registration_data.profile_image_url,
    )
    await db.commit()
    return AuthResponse(message="User registered successfully", token=token, user=user.to_public_dict())


@auth_router.post(
    "/login",
    response_model=AuthResponse,
    summary="Email/password login",
    responses={401: {"description": "Invalid email or password"}},
)
async def login(
    login_data: LoginRequest,
    user_repository: UserRepositoryImpl = Depends(get_user_repository),
):
    user, token = await AuthService(user_repository).authenticate_user(
        login_data.email, login_data.password
    )
    return AuthResponse(message="Login successful", token=token, user=user.to_public_dict())


@auth_router.get("/me", response_model=CurrentUserResponse, summary="Current user")
async def me(current_user: User = Depends(get_current_user)):
    return CurrentUserResponse(user=current_user.to_public_dict())
