"""Application layer for the telemetry pipeline."""

from src.telemetry.application.generator import ReadingGenerator
from src.telemetry.application.scheduler import SchedulerState, SimulationScheduler, TickSummary
from src.telemetry.application.scoring import HealthScorer, ScoreResult, health_score

__all__ = [
    "ReadingGenerator",
    "SchedulerState",
    "SimulationScheduler",
    "TickSummary",
    "HealthScorer",
    "ScoreResult",
    "health_score",
]
