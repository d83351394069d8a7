# 📄 File: plantcare_social/modules/community_social/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of posts and following.
#
# 🧪 Purpose (Technical Summary):
# Domain layer for community features.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - community_social presentation and infrastructure layers
