# 📄 File: plantcare_social/modules/ai_smart_features/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web side of the AI helper.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer package for AI endpoints.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
