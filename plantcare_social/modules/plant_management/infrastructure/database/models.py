# 📄 File: plantcare_social/modules/plant_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# The plants table.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy PlantModel. The diary and schedule are JSON columns in camelCase form.
#
# 🔗 Dependencies:
# - SQLAlchemy
# - shared Base
#
# 🔄 Connected Modules / Calls From:
# - PlantRepositoryImpl
# - migrations

"""
SQLAlchemy model for tracked plants.

The diary and the care schedule are small per-plant documents and are stored
as JSON columns in camelCase form.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, String, Text

from plantcare_social.shared.infrastructure.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlantModel(Base):
    __tablename__ = "plants"

    plant_id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_email = Column(String(255), nullable=False, index=True)
    plant_name = Column(String(200), nullable=False)
    plant_type = Column(String(200), nullable=False)
    date_added = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    image = Column(Text, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    daily_entries = Column(JSON, nullable=False, default=list)
    care_schedule = Column(JSON, nullable=False, default=dict)

    def __repr__(self):
        return f"<PlantModel(plant_id={self.plant_id}, user_email={self.user_email})>"
