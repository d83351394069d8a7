# 📄 File: plantcare_social/modules/plant_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promise of how tracked plants are stored.
#
# 🧪 Purpose (Technical Summary):
# Repository interface exports for plants.
#
# 🔗 Dependencies:
# - abc
#
# 🔄 Connected Modules / Calls From:
# - plant_management infrastructure (PlantRepositoryImpl)

from .plant_repository import PlantRepository

__all__ = ["PlantRepository"]
