# 📄 File: plantcare_social/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists the things any plant storage must be able to do.
#
# 🧪 Purpose (Technical Summary):
# Abstract PlantRepository: create, get_by_id, list_for_owner, save, delete.
#
# 🔗 Dependencies:
# - abc
# - Plant domain model
#
# 🔄 Connected Modules / Calls From:
# - PlantService
# - PlantRepositoryImpl

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """Repository interface for tracked plants."""

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """Persist a new plant."""

    @abstractmethod
    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        """Fresh read of one plant."""

    @abstractmethod
    async def list_for_owner(self, owner_email: str) -> List[Plant]:
        """The owner's plants, most recently added first."""

    @abstractmethod
    async def save(self, plant: Plant) -> Plant:
        """Write every mutable field of the plant."""

    @abstractmethod
    async def delete(self, plant_id: str) -> bool:
        """Delete a plant. False if it did not exist."""
