# 📄 File: plantcare_social/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what adding a plant, a diary entry or a schedule change needs.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request models with camelCase aliases.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/plants.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ....domain.models.plant import HealthStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatePlantRequest(_CamelModel):
    plant_name: Optional[str] = Field(None, max_length=200)
    plant_type: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = None
    # URL of an already-uploaded image
    image: Optional[str] = None


class UpdatePlantRequest(CreatePlantRequest):
    pass


class DailyEntryRequest(_CamelModel):
    watered: bool = False
    fertilized: bool = False
    sunlight_hours: float = Field(0, ge=0, le=24)
    temperature: Optional[float] = None
    humidity: Optional[float] = Field(None, ge=0, le=100)
    notes: str = ""
    health_status: HealthStatus = HealthStatus.GOOD
    growth_notes: str = ""


class CareScheduleRequest(_CamelModel):
    watering_frequency: Optional[int] = Field(None, ge=1)
    fertilizing_frequency: Optional[int] = Field(None, ge=1)
