# 📄 File: plantcare_social/modules/community_social/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for posting and following.
#
# 🧪 Purpose (Technical Summary):
# Domain services package: PostService and FollowService.
#
# 🔗 Dependencies:
# - community_social repositories
# - user_management repositories
#
# 🔄 Connected Modules / Calls From:
# - community_social presentation routes
