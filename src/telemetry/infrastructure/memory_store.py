"""In-memory store for monitoring sites, sensor readings and alerts."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from loguru import logger

from src.telemetry.domain.dtos import AlertCreate, ReadingCreate, SiteCreate
from src.telemetry.domain.models import Alert, Reading, Site, SiteStatus
from src.telemetry.domain.protocols import TelemetryStore


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore(TelemetryStore):
    """
    Process-local store owning the three collections.

    Entities are frozen dataclasses; updates replace the stored instance, so
    callers only ever hold snapshots. Unknown ids yield ``None`` or a no-op,
    never an exception. Mutations happen on the event loop thread only.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        """
        Initialize empty collections.

        Args:
            clock: Returns the current time; injectable for deterministic tests
        """
        self._clock = clock
        self._sites: dict[str, Site] = {}
        self._readings: dict[str, Reading] = {}
        self._alerts: dict[str, Alert] = {}

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    # Monitoring sites

    def list_sites(self) -> list[Site]:
        """List all sites in insertion order."""
        return list(self._sites.values())

    def get_site(self, site_id: str) -> Site | None:
        """Get a site by ID."""
        return self._sites.get(site_id)

    def create_site(self, fields: SiteCreate) -> Site:
        """Create a site; status defaults to online and health score to 0."""
        site = Site(
            id=self._new_id(),
            name=fields.name,
            location=fields.location,
            latitude=fields.latitude,
            longitude=fields.longitude,
            status=fields.status if fields.status is not None else SiteStatus.ONLINE,
            health_score=fields.health_score if fields.health_score is not None else 0,
            last_update=self._clock(),
        )
        self._sites[site.id] = site
        logger.debug(f"Created site {site.name} ({site.id})")
        return site

    def update_site_status(self, site_id: str, status: SiteStatus, health_score: int) -> Site | None:
        """Replace status, health score and last-update time of a site."""
        site = self._sites.get(site_id)
        if site is None:
            return None

        updated = replace(site, status=status, health_score=health_score, last_update=self._clock())
        self._sites[site_id] = updated
        return updated

    # Sensor readings

    def list_readings(self, site_id: str, limit: int = 50) -> list[Reading]:
        """
        List readings of a site, newest first, truncated to ``limit``.

        Readings sharing a timestamp keep newest-inserted first.
        """
        readings = [r for r in reversed(self._readings.values()) if r.site_id == site_id]
        readings.sort(key=lambda r: r.timestamp, reverse=True)
        return readings[: max(limit, 0)]

    def latest_reading(self, site_id: str) -> Reading | None:
        """Get the most recent reading of a site."""
        readings = self.list_readings(site_id, limit=1)
        return readings[0] if readings else None

    def create_reading(self, fields: ReadingCreate) -> Reading:
        """Create a reading; missing measurements are stored as None."""
        reading = Reading(
            id=self._new_id(),
            site_id=fields.site_id,
            ph_level=fields.ph_level,
            temperature=fields.temperature,
            dissolved_oxygen=fields.dissolved_oxygen,
            nitrates=fields.nitrates,
            turbidity=fields.turbidity,
            timestamp=self._clock(),
        )
        self._readings[reading.id] = reading
        return reading

    # Alerts

    def list_active_alerts(self) -> list[Alert]:
        """List active alerts grouped by priority, high first."""
        active = [a for a in self._alerts.values() if a.is_active]
        active.sort(key=lambda a: a.priority.rank, reverse=True)
        return active

    def alerts_for_site(self, site_id: str) -> list[Alert]:
        """List every alert of a site, active or dismissed."""
        return [a for a in self._alerts.values() if a.site_id == site_id]

    def get_alert(self, alert_id: str) -> Alert | None:
        """Get an alert by ID."""
        return self._alerts.get(alert_id)

    def create_alert(self, fields: AlertCreate) -> Alert:
        """Create an alert; it is active unless explicitly created inactive."""
        alert = Alert(
            id=self._new_id(),
            site_id=fields.site_id,
            title=fields.title,
            description=fields.description,
            priority=fields.priority,
            alert_type=fields.alert_type,
            confidence=fields.confidence,
            eta=fields.eta,
            is_active=fields.is_active if fields.is_active is not None else True,
            created_at=self._clock(),
        )
        self._alerts[alert.id] = alert
        logger.debug(f"Created {alert.priority.value} alert '{alert.title}' for site {alert.site_id}")
        return alert

    def dismiss_alert(self, alert_id: str) -> None:
        """Deactivate an alert. Unknown IDs and repeated calls are no-ops."""
        alert = self._alerts.get(alert_id)
        if alert is None:
            return

        if alert.is_active:
            self._alerts[alert_id] = replace(alert, is_active=False)
            logger.info(f"✓ Dismissed alert {alert_id}")
