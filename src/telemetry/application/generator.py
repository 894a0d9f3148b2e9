"""Synthetic sensor reading generator."""

import random
from dataclasses import dataclass

from src.telemetry.domain.dtos import ReadingCreate
from src.telemetry.domain.protocols import RandomSource


@dataclass(frozen=True)
class MeasurementBand:
    """Baseline value and symmetric noise half-width of one measurement."""

    baseline: float
    spread: float
    non_negative: bool = False

    @property
    def low(self) -> float:
        low = self.baseline - self.spread
        return max(0.0, low) if self.non_negative else low

    @property
    def high(self) -> float:
        return self.baseline + self.spread


DEFAULT_BANDS: dict[str, MeasurementBand] = {
    "ph_level": MeasurementBand(7.2, 0.2),
    "temperature": MeasurementBand(18.5, 1.0),  # °C
    "dissolved_oxygen": MeasurementBand(8.3, 0.5),  # mg/L
    "nitrates": MeasurementBand(2.1, 0.4, non_negative=True),  # mg/L
    "turbidity": MeasurementBand(5.2, 1.0, non_negative=True),  # NTU
}


class ReadingGenerator:
    """Perturbs fixed baselines with independent uniform noise."""

    def __init__(self, rng: RandomSource | None = None, bands: dict[str, MeasurementBand] | None = None):
        self.rng = rng or random.Random()
        self.bands = bands or DEFAULT_BANDS

    def _draw(self, band: MeasurementBand) -> float:
        value = band.baseline + (self.rng.random() - 0.5) * 2 * band.spread
        return max(0.0, value) if band.non_negative else value

    def generate(self, site_id: str) -> ReadingCreate:
        """Synthesize a fully populated reading for a site."""
        values = {name: self._draw(band) for name, band in self.bands.items()}
        return ReadingCreate(site_id=site_id, **values)
