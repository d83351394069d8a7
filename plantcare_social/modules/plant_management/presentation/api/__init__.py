# 📄 File: plantcare_social/modules/plant_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for plant tracking.
#
# 🧪 Purpose (Technical Summary):
# API package for plant management.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
