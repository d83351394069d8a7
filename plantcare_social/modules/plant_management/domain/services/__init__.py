# 📄 File: plantcare_social/modules/plant_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for tracking plants.
#
# 🧪 Purpose (Technical Summary):
# Domain services package: PlantService.
#
# 🔗 Dependencies:
# - PlantRepository
# - PlantCareAssistant
#
# 🔄 Connected Modules / Calls From:
# - plants routes
