# 📄 File: plantcare_social/modules/ai_smart_features/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the AI helper.
#
# 🧪 Purpose (Technical Summary):
# API package for AI features.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
