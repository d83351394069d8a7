# 📄 File: plantcare_social/modules/community_social/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for posts and follows.
#
# 🧪 Purpose (Technical Summary):
# API package for community features.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
