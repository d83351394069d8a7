# 📄 File: plantcare_social/modules/community_social/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web side of the community feed.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer package for posts and follows.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
