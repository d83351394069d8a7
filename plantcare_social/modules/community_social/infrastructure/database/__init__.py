# 📄 File: plantcare_social/modules/community_social/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database table and storage code for posts.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy model and repository implementation package for posts.
#
# 🔗 Dependencies:
# - SQLAlchemy asyncio
#
# 🔄 Connected Modules / Calls From:
# - migrations/env.py
# - posts routes
