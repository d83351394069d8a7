# 📄 File: plantcare_social/modules/ai_smart_features/__init__.py
# 🧭 Purpose (Layman Explanation):
# The AI plant-care helper that answers questions and suggests care tips.
#
# 🧪 Purpose (Technical Summary):
# AI smart features bounded context.
#
# 🔗 Dependencies:
# - shared.infrastructure.external_apis (GroqClient)
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
# - plant_management recommendations
