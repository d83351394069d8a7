# 📄 File: plantcare_social/modules/plant_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant tracking endpoints.
#
# 🧪 Purpose (Technical Summary):
# Package for the plants router.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
