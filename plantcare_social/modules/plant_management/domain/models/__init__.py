# 📄 File: plantcare_social/modules/plant_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of a plant, its diary entries and its care schedule.
#
# 🧪 Purpose (Technical Summary):
# Domain model exports: Plant, DailyEntry, CareSchedule, HealthStatus.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - plant_management repositories and services

from .plant import CareSchedule, DailyEntry, HealthStatus, Plant

__all__ = ["CareSchedule", "DailyEntry", "HealthStatus", "Plant"]
