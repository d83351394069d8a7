# 📄 File: plantcare_social/modules/community_social/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of post requests.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for post endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/posts.py
