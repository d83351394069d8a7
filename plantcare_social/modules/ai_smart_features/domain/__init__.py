# 📄 File: plantcare_social/modules/ai_smart_features/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of talking to the AI helper.
#
# 🧪 Purpose (Technical Summary):
# Domain layer for AI features.
#
# 🔗 Dependencies:
# - GroqClient
#
# 🔄 Connected Modules / Calls From:
# - ai_smart_features presentation
# - plant_management
