# 📄 File: plantcare_social/modules/community_social/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shape of a community post.
#
# 🧪 Purpose (Technical Summary):
# Domain model package for posts.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - community_social repositories and services
