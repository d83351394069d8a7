# 📄 File: plantcare_social/modules/plant_management/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, edits and removes tracked plants in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlantRepository. Diary and schedule are written
# as JSON documents through update().values.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - Plant domain models
#
# 🔄 Connected Modules / Calls From:
# - PlantService (via plants routes)

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.plant import CareSchedule, DailyEntry, Plant
from ...domain.repositories.plant_repository import PlantRepository
from .models import PlantModel

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(PlantRepository):
    """SQLAlchemy implementation of the PlantRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        model = PlantModel(plant_id=plant.plant_id, date_added=plant.date_added, **self._mutable_values(plant))
        self._session.add(model)
        await self._session.flush()
        return self._model_to_domain(model)

    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        result = await self._session.execute(
            select(PlantModel).where(PlantModel.plant_id == plant_id).execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def list_for_owner(self, owner_email: str) -> List[Plant]:
        result = await self._session.execute(
            select(PlantModel)
            .where(PlantModel.user_email == owner_email)
            .order_by(PlantModel.date_added.desc())
        )
        return [self._model_to_domain(model) for model in result.scalars()]

    async def save(self, plant: Plant) -> Plant:
        await self._session.execute(
            update(PlantModel)
            .where(PlantModel.plant_id == plant.plant_id)
            .values(**self._mutable_values(plant))
            .execution_options(synchronize_session=False)
        )
        return plant

    async def delete(self, plant_id: str) -> bool:
        result = await self._session.execute(
            delete(PlantModel).where(PlantModel.plant_id == plant_id).execution_options(synchronize_session=False)
        )
        return bool(result.rowcount)

    @staticmethod
    def _mutable_values(plant: Plant) -> dict:
        return {
            "user_email": plant.user_email,
            "plant_name": plant.plant_name,
            "plant_type": plant.plant_type,
            "image": plant.image,
            "notes": plant.notes,
            "daily_entries": [entry.model_dump(mode="json", by_alias=True) for entry in plant.daily_entries],
            "care_schedule": plant.care_schedule.model_dump(mode="json", by_alias=True),
        }

    def _model_to_domain(self, model: PlantModel) -> Plant:
        return Plant(
            plant_id=model.plant_id,
            user_email=model.user_email,
            plant_name=model.plant_name,
            plant_type=model.plant_type,
            date_added=model.date_added,
            image=model.image or "",
            notes=model.notes or "",
            daily_entries=[DailyEntry.model_validate(entry) for entry in (model.daily_entries or [])],
            care_schedule=CareSchedule.model_validate(model.care_schedule or {}),
        )
