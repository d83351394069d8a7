# 📄 File: plantcare_social/modules/plant_management/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for your plants: add, view, edit, remove, log a day, set the
# schedule and ask the AI helper for tips.
#
# 🧪 Purpose (Technical Summary):
# Owner-scoped plant CRUD, diary entry, schedule and AI recommendation endpoints.
# Other users get 403, unknown ids 404.
#
# 🔗 Dependencies:
# - PlantService
# - PlantRepositoryImpl
# - PlantCareAssistant
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router (mounted under /plants)

"""
Plant tracking endpoints.

Every plant route is scoped to its owner: other users get 403, unknown ids 404.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.modules.ai_smart_features.domain.services.plant_care_assistant import PlantCareAssistant
from plantcare_social.modules.ai_smart_features.presentation.api.v1.ai_chat import get_plant_care_assistant
from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.presentation.dependencies import get_current_user
from plantcare_social.shared.core.exceptions import UpstreamServiceError
from plantcare_social.shared.infrastructure.database.session import get_db_session

from ....domain.models.plant import DailyEntry
from ....domain.services.plant_service import PlantService
from ....infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from ..schemas.plant_schemas import CareScheduleRequest, CreatePlantRequest, DailyEntryRequest, UpdatePlantRequest

logger = logging.getLogger(__name__)

plants_router = APIRouter()


def get_plant_service(db: AsyncSession = Depends(get_db_session)) -> PlantService:
    return PlantService(PlantRepositoryImpl(db))


@plants_router.get("", summary="Current user's plants")
async def list_plants(
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
):
    return {"success": True, "plants": await service.list_plants(current_user.email)}


@plants_router.post("/add", status_code=status.HTTP_201_CREATED, summary="Start tracking a plant")
async def add_plant(
    payload: CreatePlantRequest,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
    db: AsyncSession = Depends(get_db_session),
):
    plant = await service.create(
        owner_email=current_user.email,
        plant_name=payload.plant_name,
        plant_type=payload.plant_type,
        notes=payload.notes,
        image=payload.image,
    )
    await db.commit()
    return {"success": True, "plant": plant}


@plants_router.get("/{plant_id}", summary="Single plant")
async def get_plant(
    plant_id: str,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
):
    return {"success": True, "plant": await service.get(plant_id, current_user.email)}


@plants_router.put("/{plant_id}", summary="Edit plant details")
async def update_plant(
    plant_id: str,
    payload: UpdatePlantRequest,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
    db: AsyncSession = Depends(get_db_session),
):
    plant = await service.update(
        plant_id,
        current_user.email,
        plant_name=payload.plant_name,
        plant_type=payload.plant_type,
        notes=payload.notes,
        image=payload.image,
    )
    await db.commit()
    return {"success": True, "plant": plant}


@plants_router.delete("/{plant_id}", summary="Stop tracking a plant")
async def delete_plant(
    plant_id: str,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
    db: AsyncSession = Depends(get_db_session),
):
    await service.delete(plant_id, current_user.email)
    await db.commit()
    return {"success": True, "message": "Plant deleted successfully"}


@plants_router.post("/{plant_id}/entry", summary="Record today's care entry")
async def add_daily_entry(
    plant_id: str,
    payload: DailyEntryRequest,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
    db: AsyncSession = Depends(get_db_session),
):
    entry = DailyEntry(entry_date=service.today(), **payload.model_dump())
    plant = await service.add_entry(plant_id, current_user.email, entry)
    await db.commit()
    return {"success": True, "plant": plant}


@plants_router.put("/{plant_id}/schedule", summary="Change the care schedule")
async def update_schedule(
    plant_id: str,
    payload: CareScheduleRequest,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
    db: AsyncSession = Depends(get_db_session),
):
    plant = await service.update_schedule(
        plant_id,
        current_user.email,
        watering_frequency=payload.watering_frequency,
        fertilizing_frequency=payload.fertilizing_frequency,
    )
    await db.commit()
    return {"success": True, "plant": plant}


@plants_router.post("/{plant_id}/recommendations", summary="AI care recommendations")
async def plant_recommendations(
    plant_id: str,
    current_user: User = Depends(get_current_user),
    service: PlantService = Depends(get_plant_service),
    assistant: PlantCareAssistant = Depends(get_plant_care_assistant),
):
    try:
        recommendations, summary = await service.recommendations(plant_id, current_user.email, assistant)
    except UpstreamServiceError as e:
        logger.error(f"Recommendations for plant {plant_id} failed: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "Failed to get recommendations",
                "response": "I apologize, but I'm having trouble getting recommendations right now.",
            },
        )

    return {"success": True, "recommendations": recommendations, "plantData": summary}
