"""Health scoring and alert-candidate generation for sensor readings."""

import random
from dataclasses import dataclass
from typing import Callable

from src.telemetry.domain.dtos import AlertCreate
from src.telemetry.domain.models import AlertPriority, AlertType, Reading
from src.telemetry.domain.protocols import RandomSource


@dataclass(frozen=True)
class Penalty:
    """A fixed deduction applied when its condition holds for a present measurement."""

    name: str
    points: int
    triggered: Callable[[Reading], bool]


def _present(value: float | None, condition: Callable[[float], bool]) -> bool:
    # A missing measurement is sensor dropout, not an extreme value.
    return value is not None and condition(value)


PENALTIES: tuple[Penalty, ...] = (
    Penalty("ph_level", 20, lambda r: _present(r.ph_level, lambda v: v < 6.5 or v > 8.5)),
    Penalty("temperature", 15, lambda r: _present(r.temperature, lambda v: v > 25 or v < 10)),
    Penalty("dissolved_oxygen", 25, lambda r: _present(r.dissolved_oxygen, lambda v: v < 6)),
    Penalty("nitrates", 20, lambda r: _present(r.nitrates, lambda v: v > 3)),
    Penalty("turbidity", 10, lambda r: _present(r.turbidity, lambda v: v > 10)),
)


def health_score(reading: Reading) -> int:
    """
    Compute the 0-100 health score of a reading.

    Starts at 100, subtracts every triggered penalty, then clamps.
    """
    score = 100 - sum(p.points for p in PENALTIES if p.triggered(reading))
    return max(0, min(100, score))


def triggered_penalties(reading: Reading) -> list[str]:
    """Names of the measurements whose thresholds the reading violates."""
    return [p.name for p in PENALTIES if p.triggered(reading)]


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring one reading."""

    health_score: int
    alert_candidate: AlertCreate | None = None


class HealthScorer:
    """
    Maps a reading to a health score and zero-or-one alert candidate.

    The score is deterministic. The only randomness is the alert draw, taken
    from the injected ``rng`` and only when nitrates exceed the alert
    threshold, so tests can force either branch with a scripted source.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        alert_probability: float = 0.1,
        nitrate_threshold: float = 3.5,
        alert_confidence: int = 92,
    ):
        self.rng = rng or random.Random()
        self.alert_probability = alert_probability
        self.nitrate_threshold = nitrate_threshold
        self.alert_confidence = alert_confidence

    def score(self, reading: Reading, site_name: str | None = None) -> ScoreResult:
        """
        Score a reading.

        Args:
            reading: The reading to evaluate
            site_name: Used in the alert description; falls back to the site id

        Returns:
            Health score and an optional high-priority anomaly alert candidate
        """
        result_score = health_score(reading)

        if not self.is_alert_eligible(reading):
            return ScoreResult(health_score=result_score)

        if self.rng.random() >= self.alert_probability:
            return ScoreResult(health_score=result_score)

        candidate = AlertCreate(
            site_id=reading.site_id,
            title="High Nitrate Alert",
            description=f"Nitrate levels at {site_name or reading.site_id} have exceeded safe thresholds.",
            priority=AlertPriority.HIGH,
            alert_type=AlertType.ANOMALY,
            confidence=self.alert_confidence,
            eta=None,
            is_active=True,
        )
        return ScoreResult(health_score=result_score, alert_candidate=candidate)

    def is_alert_eligible(self, reading: Reading) -> bool:
        """Whether the reading qualifies for the probabilistic alert draw."""
        return reading.nitrates is not None and reading.nitrates > self.nitrate_threshold
