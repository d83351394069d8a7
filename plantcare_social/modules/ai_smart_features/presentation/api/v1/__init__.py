# 📄 File: plantcare_social/modules/ai_smart_features/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the AI helper endpoints.
#
# 🧪 Purpose (Technical Summary):
# Package for the AI router.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
