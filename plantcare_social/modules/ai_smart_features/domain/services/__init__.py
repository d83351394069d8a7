# 📄 File: plantcare_social/modules/ai_smart_features/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# How questions are turned into AI requests.
#
# 🧪 Purpose (Technical Summary):
# Domain services package: PlantCareAssistant.
#
# 🔗 Dependencies:
# - GroqClient
#
# 🔄 Connected Modules / Calls From:
# - ai_chat routes
# - plants routes
