"""Domain layer for the telemetry pipeline."""

from src.telemetry.domain.dtos import AlertCreate, ReadingCreate, SiteCreate
from src.telemetry.domain.events import TelemetryEvent, parse_event, serialize_event
from src.telemetry.domain.exceptions import (
    MalformedEventError,
    ResourceNotFoundException,
    SiteNotFoundError,
    TelemetryException,
)
from src.telemetry.domain.models import Alert, AlertPriority, AlertType, Reading, Site, SiteStatus
from src.telemetry.domain.protocols import Connection, RandomSource, TelemetryStore

__all__ = [
    "AlertCreate",
    "ReadingCreate",
    "SiteCreate",
    "TelemetryEvent",
    "parse_event",
    "serialize_event",
    "MalformedEventError",
    "ResourceNotFoundException",
    "SiteNotFoundError",
    "TelemetryException",
    "Alert",
    "AlertPriority",
    "AlertType",
    "Reading",
    "Site",
    "SiteStatus",
    "Connection",
    "RandomSource",
    "TelemetryStore",
]
