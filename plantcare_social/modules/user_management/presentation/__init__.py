# 📄 File: plantcare_social/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web side of accounts: sign-up, login and the current-user lookup.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer package: routers, schemas and the bearer dependency.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
