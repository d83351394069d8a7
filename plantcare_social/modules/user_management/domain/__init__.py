# 📄 File: plantcare_social/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core ideas of accounts, free of web or database details.
#
# 🧪 Purpose (Technical Summary):
# Domain layer exports: User and IdentityVerifier.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - user_management presentation and infrastructure layers

from .models.user import User
from .services.identity_verifier import IdentityVerifier

__all__ = ["User", "IdentityVerifier"]
