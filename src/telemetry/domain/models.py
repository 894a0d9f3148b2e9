"""Domain models for the telemetry pipeline."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SiteStatus(str, Enum):
    """Operational status of a monitoring site."""

    ONLINE = "online"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"


class AlertPriority(str, Enum):
    """Priority of an alert (high > medium > low)."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Numeric rank, larger is more urgent."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {AlertPriority.HIGH: 3, AlertPriority.MEDIUM: 2, AlertPriority.LOW: 1}


class AlertType(str, Enum):
    """Kind of condition an alert reports."""

    PREDICTION = "prediction"
    ANOMALY = "anomaly"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class Site:
    """A monitored physical location."""

    id: str
    name: str
    location: str
    latitude: float
    longitude: float
    status: SiteStatus
    health_score: int  # 0-100, only meaningful while online
    last_update: datetime


@dataclass(frozen=True)
class Reading:
    """One timestamped set of sensor measurements for a site.

    Every measurement is independently nullable (sensor dropout).
    """

    id: str
    site_id: str
    ph_level: float | None
    temperature: float | None  # °C
    dissolved_oxygen: float | None  # mg/L
    nitrates: float | None  # mg/L
    turbidity: float | None  # NTU
    timestamp: datetime


@dataclass(frozen=True)
class Alert:
    """A persisted notification. Only ``is_active`` changes after creation."""

    id: str
    site_id: str
    title: str
    description: str
    priority: AlertPriority
    alert_type: AlertType
    confidence: int | None
    eta: str | None
    is_active: bool
    created_at: datetime
