# 📄 File: plantcare_social/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Tracking your own plants: a daily diary, a care schedule and AI suggestions.
#
# 🧪 Purpose (Technical Summary):
# Plant management bounded context.
#
# 🔗 Dependencies:
# - plantcare_social.shared
# - ai_smart_features
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
