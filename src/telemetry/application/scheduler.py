"""Periodic simulation scheduler driving the reading/scoring/alerting cycle."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from loguru import logger

from src.telemetry.application.generator import ReadingGenerator
from src.telemetry.application.scoring import HealthScorer
from src.telemetry.domain import events
from src.telemetry.domain.models import Site, SiteStatus
from src.telemetry.domain.protocols import TelemetryStore
from src.telemetry.infrastructure.broadcast import BroadcastChannel
from src.telemetry.infrastructure.logging import LoggingContext


class SchedulerState(str, Enum):
    """State of the simulation scheduler."""

    IDLE = "idle"
    RUNNING_TICK = "running_tick"


@dataclass(frozen=True)
class TickSummary:
    """Result of one pass over all sites."""

    tick_id: int
    sites_processed: int
    sites_skipped: int
    alerts_raised: int


class SimulationScheduler:
    """
    Runs the simulation tick on a fixed period.

    For every online site a tick stores a synthetic reading, scores it,
    stores the new health score and broadcasts ``sensor_update`` then
    ``site_status_update``, plus ``alert_created`` when the scorer raises an
    alert. Ticks never overlap: a tick requested while another is running is
    skipped.
    """

    def __init__(
        self,
        store: TelemetryStore,
        channel: BroadcastChannel,
        scorer: HealthScorer,
        generator: ReadingGenerator,
        interval_seconds: float = 30.0,
        initial_delay_seconds: float = 2.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the scheduler.

        Args:
            store: Store the tick reads sites from and writes results to
            channel: Broadcast channel for real-time events
            scorer: Health scoring and alerting engine
            generator: Synthetic reading source
            interval_seconds: Period between tick starts
            initial_delay_seconds: Delay before the first tick after start()
            sleep: Awaitable sleep; injectable for tests
        """
        self.store = store
        self.channel = channel
        self.scorer = scorer
        self.generator = generator
        self.interval_seconds = interval_seconds
        self.initial_delay_seconds = initial_delay_seconds
        self._sleep = sleep

        self._state = SchedulerState.IDLE
        self._tick_lock = asyncio.Lock()
        self._tick_count = 0
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def tick_count(self) -> int:
        """Number of ticks started so far."""
        return self._tick_count

    @property
    def is_running(self) -> bool:
        """Whether the periodic loop is active."""
        return self._task is not None and not self._task.done()

    async def run_tick(self) -> TickSummary | None:
        """
        Execute one pass over all sites.

        Returns:
            Summary of the tick, or None if a tick was already running
        """
        if self._tick_lock.locked():
            logger.warning("Previous tick still running, skipping this one")
            return None

        async with self._tick_lock:
            self._state = SchedulerState.RUNNING_TICK
            self._tick_count += 1
            tick_id = self._tick_count

            try:
                with LoggingContext(tick_id=tick_id):
                    logger.info(f"Tick {tick_id} started")
                    return await self._run_sites(tick_id)
            finally:
                self._state = SchedulerState.IDLE

    async def _run_sites(self, tick_id: int) -> TickSummary:
        sites = self.store.list_sites()
        processed = skipped = alerts = 0

        for site in sites:
            if site.status != SiteStatus.ONLINE:
                skipped += 1
                continue

            with LoggingContext(site_id=site.id):
                if await self._process_site(site):
                    alerts += 1
            processed += 1

        summary = TickSummary(
            tick_id=tick_id,
            sites_processed=processed,
            sites_skipped=skipped,
            alerts_raised=alerts,
        )
        logger.info(
            f"Tick {tick_id} complete: {processed} sites updated, "
            f"{skipped} skipped, {alerts} alerts raised"
        )
        return summary

    async def _process_site(self, site: Site) -> bool:
        """Generate, score, persist and broadcast one site's update. Returns True if an alert was raised."""
        reading = self.store.create_reading(self.generator.generate(site.id))
        result = self.scorer.score(reading, site_name=site.name)
        self.store.update_site_status(site.id, SiteStatus.ONLINE, result.health_score)

        logger.debug(f"Stored reading {reading.id} for {site.name}, health score {result.health_score}")

        await self.channel.broadcast(events.sensor_update(reading))
        await self.channel.broadcast(
            events.site_status_update(site.id, SiteStatus.ONLINE, result.health_score)
        )

        if result.alert_candidate is None:
            return False

        alert = self.store.create_alert(result.alert_candidate)
        logger.warning(f"⚠️ {alert.title} raised for {site.name}")
        await self.channel.broadcast(events.alert_created(alert))
        return True

    async def _run_loop(self) -> None:
        """Wait the initial delay, then tick once per period (start to start)."""
        loop = asyncio.get_running_loop()
        await self._sleep(self.initial_delay_seconds)

        while True:
            started = loop.time()
            try:
                await self.run_tick()
            except Exception:
                logger.exception("Simulation tick failed")

            elapsed = loop.time() - started
            await self._sleep(max(0.0, self.interval_seconds - elapsed))

    def start(self) -> None:
        """Start the periodic loop on the running event loop."""
        if self.is_running:
            return

        self._task = asyncio.create_task(self._run_loop(), name="simulation-scheduler")
        logger.info(
            f"✓ Simulation scheduler started (first tick in {self.initial_delay_seconds}s, "
            f"then every {self.interval_seconds}s)"
        )

    async def stop(self) -> None:
        """Cancel the periodic loop and wait for it to finish."""
        if self._task is None:
            return

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("✓ Simulation scheduler stopped")
