# 📄 File: plantcare_social/modules/plant_management/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# Keeps each person's plant diary: which plants they track, what they did for them
# each day, and how often they should water and feed them.
# 🧪 Purpose (Technical Summary):
# Owner-scoped plant CRUD, one-entry-per-day diary recording, schedule updates and
# the tracking summary handed to the AI assistant for recommendations.
# 🔗 Dependencies:
# Plant models and repository, PlantCareAssistant, shared exceptions
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/plants.py

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from plantcare_social.modules.ai_smart_features.domain.services.plant_care_assistant import PlantCareAssistant
from plantcare_social.shared.core.exceptions import AuthorizationError, NotFoundError, ValidationError

from ..models.plant import DailyEntry, Plant
from ..repositories.plant_repository import PlantRepository

logger = logging.getLogger(__name__)


class PlantService:

    def __init__(self, plant_repository: PlantRepository):
        self.plant_repository = plant_repository

    async def list_plants(self, owner_email: str) -> List[Plant]:
        return await self.plant_repository.list_for_owner(owner_email)

    async def get(self, plant_id: str, actor_email: str) -> Plant:
        """
        Raises:
            NotFoundError: No such plant
            AuthorizationError: The plant belongs to someone else
        """
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            raise NotFoundError("Plant not found", resource_type="plant", resource_id=plant_id)
        if not plant.is_owned_by(actor_email):
            raise AuthorizationError("Unauthorized access", resource_type="plant", resource_id=plant_id)
        return plant

    async def create(
        self,
        owner_email: str,
        plant_name: Optional[str],
        plant_type: Optional[str],
        notes: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Plant:
        plant_name = (plant_name or "").strip()
        plant_type = (plant_type or "").strip()
        if not plant_name or not plant_type:
            raise ValidationError("Plant name and type are required", field="plantName")

        plant = Plant(
            user_email=owner_email,
            plant_name=plant_name,
            plant_type=plant_type,
            notes=notes or "",
            image=image or "",
        )
        created = await self.plant_repository.create(plant)
        logger.info(f"Plant {created.plant_id} added by {owner_email}")
        return created

    async def update(
        self,
        plant_id: str,
        actor_email: str,
        plant_name: Optional[str] = None,
        plant_type: Optional[str] = None,
        notes: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Plant:
        """Only provided, non-empty names are applied; notes may be cleared with ''."""
        plant = await self.get(plant_id, actor_email)
        if plant_name:
            plant.plant_name = plant_name
        if plant_type:
            plant.plant_type = plant_type
        if notes is not None:
            plant.notes = notes
        if image:
            plant.image = image
        return await self.plant_repository.save(plant)

    async def delete(self, plant_id: str, actor_email: str) -> None:
        await self.get(plant_id, actor_email)
        await self.plant_repository.delete(plant_id)
        logger.info(f"Plant {plant_id} deleted by {actor_email}")

    async def add_entry(self, plant_id: str, actor_email: str, entry: DailyEntry) -> Plant:
        plant = await self.get(plant_id, actor_email)
        plant.record_entry(entry)
        return await self.plant_repository.save(plant)

    async def update_schedule(
        self,
        plant_id: str,
        actor_email: str,
        watering_frequency: Optional[int] = None,
        fertilizing_frequency: Optional[int] = None,
    ) -> Plant:
        plant = await self.get(plant_id, actor_email)
        if watering_frequency is not None:
            plant.care_schedule.watering_frequency = watering_frequency
        if fertilizing_frequency is not None:
            plant.care_schedule.fertilizing_frequency = fertilizing_frequency
        return await self.plant_repository.save(plant)

    async def recommendations(
        self, plant_id: str, actor_email: str, assistant: PlantCareAssistant
    ) -> Tuple[str, str]:
        """
        Returns:
            (recommendation text, tracking summary sent to the assistant)
        """
        plant = await self.get(plant_id, actor_email)
        summary = plant.tracking_summary(today=self.today())
        return await assistant.recommend(summary), summary

    @staticmethod
    def today() -> date:
        return datetime.now(timezone.utc).date()
