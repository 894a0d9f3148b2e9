"""Protocols (interfaces) for telemetry components."""

from typing import Protocol, runtime_checkable

from src.telemetry.domain.dtos import AlertCreate, ReadingCreate, SiteCreate
from src.telemetry.domain.models import Alert, Reading, Site, SiteStatus


class RandomSource(Protocol):
    """Source of uniform random draws. ``random.Random`` satisfies it."""

    def random(self) -> float:
        """Return a uniform value in [0, 1)."""
        ...


@runtime_checkable
class Connection(Protocol):
    """An outbound real-time connection the broadcast channel can write to."""

    @property
    def is_open(self) -> bool:
        """Whether the connection is currently open for writing."""
        ...

    async def send_text(self, payload: str) -> None:
        """Send one serialised event."""
        ...


class TelemetryStore(Protocol):
    """Interface for the site/reading/alert store."""

    def list_sites(self) -> list[Site]:
        ...

    def get_site(self, site_id: str) -> Site | None:
        ...

    def create_site(self, fields: SiteCreate) -> Site:
        ...

    def update_site_status(self, site_id: str, status: SiteStatus, health_score: int) -> Site | None:
        ...

    def list_readings(self, site_id: str, limit: int = 50) -> list[Reading]:
        ...

    def latest_reading(self, site_id: str) -> Reading | None:
        ...

    def create_reading(self, fields: ReadingCreate) -> Reading:
        ...

    def list_active_alerts(self) -> list[Alert]:
        ...

    def alerts_for_site(self, site_id: str) -> list[Alert]:
        ...

    def create_alert(self, fields: AlertCreate) -> Alert:
        ...

    def dismiss_alert(self, alert_id: str) -> None:
        ...
