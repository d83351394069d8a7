# 📄 File: plantcare_social/modules/plant_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database table and storage code for tracked plants.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy model and repository implementation package for plants.
#
# 🔗 Dependencies:
# - SQLAlchemy asyncio
#
# 🔄 Connected Modules / Calls From:
# - migrations/env.py
# - plants routes
