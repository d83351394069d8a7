# 📄 File: plantcare_social/modules/plant_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of plant requests.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for plant endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/plants.py
