# 📄 File: plantcare_social/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where user accounts actually live in the database.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for user management.
#
# 🔗 Dependencies:
# - SQLAlchemy
#
# 🔄 Connected Modules / Calls From:
# - user_management presentation
# - notification fan-out
