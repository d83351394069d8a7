# 📄 File: plantcare_social/modules/community_social/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the post and follow endpoints.
#
# 🧪 Purpose (Technical Summary):
# Package for the posts and follow routers.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
