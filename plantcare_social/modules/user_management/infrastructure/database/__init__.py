# 📄 File: plantcare_social/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database table and storage code for user accounts.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy model and repository implementation package for users.
#
# 🔗 Dependencies:
# - SQLAlchemy asyncio
#
# 🔄 Connected Modules / Calls From:
# - migrations/env.py
# - route dependencies
