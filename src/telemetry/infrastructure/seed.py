"""Startup seed data: the fixed monitoring sites and their initial alerts."""

from loguru import logger

from src.telemetry.application.generator import ReadingGenerator
from src.telemetry.domain.dtos import AlertCreate, SiteCreate
from src.telemetry.domain.models import AlertPriority, AlertType, SiteStatus
from src.telemetry.domain.protocols import TelemetryStore

SEED_SITES: list[SiteCreate] = [
    SiteCreate(
        name="Murray River Site A",
        location="-35.1185, 147.3598",
        latitude=-35.1185,
        longitude=147.3598,
        status=SiteStatus.ONLINE,
        health_score=92,
    ),
    SiteCreate(
        name="Wagga Lagoon",
        location="-35.1056, 147.3494",
        latitude=-35.1056,
        longitude=147.3494,
        status=SiteStatus.ONLINE,
        health_score=76,
    ),
    SiteCreate(
        name="Murrumbidgee River Site C-07",
        location="-35.1344, 147.3247",
        latitude=-35.1344,
        longitude=147.3247,
        status=SiteStatus.ONLINE,
        health_score=89,
    ),
    SiteCreate(
        name="Lake Albert",
        location="-35.1598, 147.3112",
        latitude=-35.1598,
        longitude=147.3112,
        status=SiteStatus.OFFLINE,
        health_score=0,
    ),
]


def _seed_alerts(site_ids: list[str]) -> list[AlertCreate]:
    """Alerts attached to the first three seeded sites."""
    return [
        AlertCreate(
            site_id=site_ids[0],
            title="High Nitrate Prediction",
            description=(
                "ML model predicts nitrate levels will exceed safe thresholds in "
                "Murray River Site A within 6-8 hours based on current trends."
            ),
            priority=AlertPriority.HIGH,
            alert_type=AlertType.PREDICTION,
            confidence=94,
            eta="6-8 hours",
        ),
        AlertCreate(
            site_id=site_ids[1],
            title="Temperature Anomaly",
            description=(
                "Unusual temperature spike detected at Wagga Lagoon. "
                "May indicate thermal pollution source."
            ),
            priority=AlertPriority.MEDIUM,
            alert_type=AlertType.ANOMALY,
            confidence=87,
        ),
        AlertCreate(
            site_id=site_ids[2],
            title="Maintenance Reminder",
            description=(
                "Sensor calibration due for Site C-07. "
                "Schedule maintenance to ensure data accuracy."
            ),
            priority=AlertPriority.LOW,
            alert_type=AlertType.MAINTENANCE,
        ),
    ]


def seed_store(store: TelemetryStore, generator: ReadingGenerator) -> None:
    """
    Populate an empty store with the fixed sites, one initial reading per
    online site, and the three standing alerts.
    """
    site_ids = []
    for fields in SEED_SITES:
        site = store.create_site(fields)
        site_ids.append(site.id)

        if site.status == SiteStatus.ONLINE:
            store.create_reading(generator.generate(site.id))

    alerts = _seed_alerts(site_ids)
    for fields in alerts:
        store.create_alert(fields)

    logger.info(f"✓ Seeded {len(site_ids)} monitoring sites and {len(alerts)} alerts")
