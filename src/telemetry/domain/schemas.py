"""Pydantic record schemas shared by the request layer and the real-time channel."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.telemetry.domain.models import AlertPriority, AlertType, SiteStatus


class CamelModel(BaseModel):
    """Base schema serialised with camelCase field names."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class SiteRecord(CamelModel):
    """Schema for a monitoring site."""

    id: str
    name: str
    location: str
    latitude: float
    longitude: float
    status: SiteStatus
    health_score: int
    last_update: datetime


class ReadingRecord(CamelModel):
    """Schema for a sensor reading."""

    id: str
    site_id: str
    ph_level: float | None
    temperature: float | None
    dissolved_oxygen: float | None
    nitrates: float | None
    turbidity: float | None
    timestamp: datetime


class AlertRecord(CamelModel):
    """Schema for an alert."""

    id: str
    site_id: str
    title: str
    description: str
    priority: AlertPriority
    alert_type: AlertType
    confidence: int | None = None
    eta: str | None = None
    is_active: bool = True
    created_at: datetime
