"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel

from src.telemetry.application.scheduler import SchedulerState
from src.telemetry.domain.schemas import AlertRecord, ReadingRecord, SiteRecord

# Entity responses share the camelCase record schemas of the real-time channel
SiteResponse = SiteRecord
ReadingResponse = ReadingRecord
AlertResponse = AlertRecord


class DismissResponse(BaseModel):
    """Acknowledgement of an alert dismissal."""

    success: bool = True


class HealthResponse(BaseModel):
    """Schema for the health check."""

    status: str = "healthy"
    scheduler: SchedulerState | None = None
    connections: int = 0


class RootResponse(BaseModel):
    """Schema for the service banner."""

    message: str
    version: str
    docs: str = "/docs"
    realtime: str
