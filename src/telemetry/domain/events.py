"""Real-time event envelope: ``{"type": ..., "data": ...}``."""

from typing import Annotated, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from src.telemetry.domain.exceptions import MalformedEventError
from src.telemetry.domain.models import Alert, Reading, SiteStatus
from src.telemetry.domain.schemas import AlertRecord, CamelModel


class SensorValues(CamelModel):
    """The five measurements carried by a sensor update (all present at emission)."""

    ph_level: float
    temperature: float
    dissolved_oxygen: float
    nitrates: float
    turbidity: float


class SensorUpdateData(CamelModel):
    site_id: str
    readings: SensorValues


class SiteStatusUpdateData(CamelModel):
    site_id: str
    status: SiteStatus
    health_score: int = Field(ge=0, le=100)


class SensorUpdateEvent(CamelModel):
    type: Literal["sensor_update"] = "sensor_update"
    data: SensorUpdateData


class SiteStatusUpdateEvent(CamelModel):
    type: Literal["site_status_update"] = "site_status_update"
    data: SiteStatusUpdateData


class AlertCreatedEvent(CamelModel):
    type: Literal["alert_created"] = "alert_created"
    data: AlertRecord


TelemetryEvent = Annotated[
    Union[SensorUpdateEvent, SiteStatusUpdateEvent, AlertCreatedEvent],
    Field(discriminator="type"),
]

_event_adapter: TypeAdapter[TelemetryEvent] = TypeAdapter(TelemetryEvent)


def sensor_update(reading: Reading) -> SensorUpdateEvent:
    """Build a ``sensor_update`` event from a fully populated reading."""
    return SensorUpdateEvent(
        data=SensorUpdateData(
            site_id=reading.site_id,
            readings=SensorValues.model_validate(reading),
        )
    )


def site_status_update(site_id: str, status: SiteStatus, health_score: int) -> SiteStatusUpdateEvent:
    """Build a ``site_status_update`` event."""
    return SiteStatusUpdateEvent(
        data=SiteStatusUpdateData(site_id=site_id, status=status, health_score=health_score)
    )


def alert_created(alert: Alert) -> AlertCreatedEvent:
    """Build an ``alert_created`` event carrying the full alert record."""
    return AlertCreatedEvent(data=AlertRecord.model_validate(alert))


def serialize_event(event: TelemetryEvent) -> str:
    """Serialise an event to its camelCase JSON wire form."""
    return event.model_dump_json(by_alias=True)


def parse_event(raw: str | bytes) -> TelemetryEvent:
    """
    Parse a wire payload into a typed event.

    Raises:
        MalformedEventError: If the payload is not JSON or does not match any event shape
    """
    try:
        return _event_adapter.validate_json(raw)
    except ValidationError as e:
        raise MalformedEventError(
            "Malformed real-time event",
            details={"errors": e.error_count(), "payload": raw[:200]},
        ) from e
