# 📄 File: plantcare_social/modules/community_social/__init__.py
# 🧭 Purpose (Layman Explanation):
# The community feed: posts, likes, comments and who follows whom.
#
# 🧪 Purpose (Technical Summary):
# Community social bounded context.
#
# 🔗 Dependencies:
# - plantcare_social.shared
# - user_management
# - notification_communication (fan-out)
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
