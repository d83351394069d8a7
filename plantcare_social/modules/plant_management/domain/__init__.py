# 📄 File: plantcare_social/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of plant tracking.
#
# 🧪 Purpose (Technical Summary):
# Domain layer for plant tracking.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - plant_management presentation and infrastructure layers
