# 📄 File: plantcare_social/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of account requests and responses.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for authentication endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/auth.py
