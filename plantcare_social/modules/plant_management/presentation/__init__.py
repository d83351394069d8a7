# 📄 File: plantcare_social/modules/plant_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web side of plant tracking.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer package for plant endpoints.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
