# 📄 File: plantcare_social/modules/plant_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where tracked plants actually live in the database.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for plant tracking.
#
# 🔗 Dependencies:
# - SQLAlchemy
#
# 🔄 Connected Modules / Calls From:
# - plants routes
