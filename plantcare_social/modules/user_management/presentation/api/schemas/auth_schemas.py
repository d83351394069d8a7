# 📄 File: plantcare_social/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a sign-up or login request has to contain.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request models with camelCase aliases matching the mobile client.
#
# 🔗 Dependencies:
# - pydantic (EmailStr via email-validator)
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/auth.py

"""
Request/response schemas for authentication endpoints.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class RegisterRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = Field(None, max_length=32)
    user_type: Optional[str] = Field(None, alias="type", max_length=32)
    profile_image_url: str = ""


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    token: str
    user: Dict[str, Any]


class CurrentUserResponse(BaseModel):
    success: bool = True
    user: Dict[str, Any]
