# 📄 File: plantcare_social/modules/ai_smart_features/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shape of a question to the AI helper.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for AI endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/ai_chat.py
