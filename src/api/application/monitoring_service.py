"""Service for read/dismiss requests against the telemetry store."""

from loguru import logger

from src.api.domain.schemas import AlertResponse, ReadingResponse, SiteResponse
from src.telemetry.domain.exceptions import SiteNotFoundError
from src.telemetry.domain.protocols import TelemetryStore


class MonitoringService:
    """Returns snapshots of sites, readings and alerts for the presentation layer."""

    def __init__(self, store: TelemetryStore):
        self.store = store

    def list_sites(self) -> list[SiteResponse]:
        """List all monitoring sites."""
        return [SiteResponse.model_validate(s) for s in self.store.list_sites()]

    def get_site(self, site_id: str) -> SiteResponse:
        """
        Get a monitoring site.

        Raises:
            SiteNotFoundError: If no site has this ID
        """
        site = self.store.get_site(site_id)
        if site is None:
            raise SiteNotFoundError(site_id)
        return SiteResponse.model_validate(site)

    def list_readings(self, site_id: str, limit: int) -> list[ReadingResponse]:
        """List readings of a site, newest first. Unknown sites yield an empty list."""
        return [ReadingResponse.model_validate(r) for r in self.store.list_readings(site_id, limit)]

    def latest_reading(self, site_id: str) -> ReadingResponse | None:
        """Get the latest reading of a site, or None."""
        reading = self.store.latest_reading(site_id)
        return ReadingResponse.model_validate(reading) if reading else None

    def list_site_alerts(self, site_id: str) -> list[AlertResponse]:
        """List all alerts of a site, including dismissed ones."""
        return [AlertResponse.model_validate(a) for a in self.store.alerts_for_site(site_id)]

    def list_active_alerts(self) -> list[AlertResponse]:
        """List active alerts, high priority first."""
        return [AlertResponse.model_validate(a) for a in self.store.list_active_alerts()]

    def dismiss_alert(self, alert_id: str) -> None:
        """Dismiss an alert; unknown IDs are ignored."""
        self.store.dismiss_alert(alert_id)
        logger.debug(f"Dismiss requested for alert {alert_id}")
