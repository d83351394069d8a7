# 📄 File: plantcare_social/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# A plant someone tracks, with one diary entry per day and when it was last
# watered or fed.
#
# 🧪 Purpose (Technical Summary):
# Plant aggregate with the daily-entry diary, the care schedule and the
# plain-text tracking summary used as AI prompt input.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - PlantService
# - PlantRepositoryImpl
# - plants routes

"""
Plant tracking domain models.

A tracked plant belongs to one owner and carries its daily care diary plus a
simple watering / fertilizing schedule.
"""

import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HealthStatus(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class DailyEntry(BaseModel):
    """One diary entry; at most one per calendar day."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True, validate_default=True
    )

    entry_date: date = Field(..., alias="date")
    watered: bool = False
    fertilized: bool = False
    sunlight_hours: float = 0
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    notes: str = ""
    health_status: HealthStatus = HealthStatus.GOOD
    growth_notes: str = ""


class CareSchedule(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    watering_frequency: int = 3
    fertilizing_frequency: int = 14
    last_watered: Optional[date] = None
    last_fertilized: Optional[date] = None


class Plant(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    plant_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="id")
    user_email: str
    plant_name: str
    plant_type: str
    date_added: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    image: str = ""
    notes: str = ""
    daily_entries: List[DailyEntry] = Field(default_factory=list)
    care_schedule: CareSchedule = Field(default_factory=CareSchedule)

    def is_owned_by(self, identity: str) -> bool:
        return self.user_email == identity

    def record_entry(self, entry: DailyEntry) -> None:
        """
        Add the entry, replacing any entry already recorded for the same day,
        and move the last watered / fertilized dates forward.
        """
        entries = [existing for existing in self.daily_entries if existing.entry_date != entry.entry_date]
        entries.append(entry)
        self.daily_entries = sorted(entries, key=lambda e: e.entry_date)

        if entry.watered:
            self.care_schedule.last_watered = entry.entry_date
        if entry.fertilized:
            self.care_schedule.last_fertilized = entry.entry_date

    def recent_entries(self, limit: int = 7) -> List[DailyEntry]:
        """Newest first."""
        return sorted(self.daily_entries, key=lambda e: e.entry_date, reverse=True)[:limit]

    def tracking_summary(self, today: Optional[date] = None) -> str:
        """Plain-text digest of the last week of tracking, used as AI prompt input."""
        today = today or datetime.now(timezone.utc).date()
        recent = self.recent_entries()
        latest = recent[0] if recent else None

        avg_sunlight = sum(e.sunlight_hours or 0 for e in recent) / len(recent) if recent else 0.0
        health = latest.health_status if latest else HealthStatus.GOOD.value
        last_watered = self.care_schedule.last_watered
        days_since_watering = (today - last_watered).days if last_watered else "Not recorded"

        lines = [
            f"Plant Name: {self.plant_name}",
            f"Plant Type: {self.plant_type}",
            f"Days Tracked: {len(self.daily_entries)}",
            f"Average Sunlight Hours (last 7 days): {avg_sunlight:.1f} hours",
            f"Current Health Status: {health}",
            f"Watering Frequency: Every {self.care_schedule.watering_frequency} days",
            f"Days since last watering: {days_since_watering}",
            f"Recent Notes: {(latest.notes if latest else '') or 'None'}",
            f"Growth Notes: {(latest.growth_notes if latest else '') or 'None'}",
        ]
        return "\n".join(lines)
