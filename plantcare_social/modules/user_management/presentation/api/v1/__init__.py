# 📄 File: plantcare_social/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the account endpoints.
#
# 🧪 Purpose (Technical Summary):
# Exports the auth router.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
