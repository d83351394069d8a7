# 📄 File: plantcare_social/modules/community_social/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promise of how posts are stored and found.
#
# 🧪 Purpose (Technical Summary):
# Repository interface package for posts.
#
# 🔗 Dependencies:
# - abc
#
# 🔄 Connected Modules / Calls From:
# - community_social infrastructure (PostRepositoryImpl)
