"""Data Transfer Objects (DTOs) for creating telemetry entities."""

from pydantic import BaseModel, Field

from src.telemetry.domain.models import AlertPriority, AlertType, SiteStatus


class SiteCreate(BaseModel):
    """Fields for creating a monitoring site."""

    name: str = Field(min_length=1, description="Display name of the site")
    location: str = Field(description="Human-readable location label")
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    status: SiteStatus | None = Field(default=None, description="Defaults to online when omitted")
    health_score: int | None = Field(default=None, ge=0, le=100, description="Defaults to 0 when omitted")


class ReadingCreate(BaseModel):
    """
    Fields for creating a sensor reading.

    Omitted measurements are stored as null, never defaulted.
    """

    site_id: str
    ph_level: float | None = None
    temperature: float | None = None
    dissolved_oxygen: float | None = None
    nitrates: float | None = None
    turbidity: float | None = None


class AlertCreate(BaseModel):
    """Fields for creating an alert."""

    site_id: str
    title: str
    description: str
    priority: AlertPriority
    alert_type: AlertType
    confidence: int | None = Field(default=None, ge=0, le=100)
    eta: str | None = None
    is_active: bool | None = Field(default=None, description="Defaults to true when omitted")
