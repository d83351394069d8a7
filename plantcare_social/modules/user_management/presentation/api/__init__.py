# 📄 File: plantcare_social/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for accounts.
#
# 🧪 Purpose (Technical Summary):
# API package for user management.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
