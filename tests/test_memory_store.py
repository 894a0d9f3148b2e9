"""Tests for the in-memory site/reading/alert store."""

from __future__ import annotations

from datetime import datetime, timezone

from src.telemetry.domain.dtos import AlertCreate, ReadingCreate, SiteCreate
from src.telemetry.domain.models import AlertPriority, AlertType, SiteStatus
from src.telemetry.infrastructure.memory_store import InMemoryStore
from tests.helpers.doubles import make_alert, make_reading


class TestSites:
    """Site creation defaults, lookup and status updates."""

    def test_create_site_defaults(self, store: InMemoryStore, clock) -> None:
        site = store.create_site(
            SiteCreate(name="New Site", location="somewhere", latitude=1.0, longitude=2.0)
        )
        assert site.status == SiteStatus.ONLINE
        assert site.health_score == 0
        assert site.last_update is not None
        assert store.get_site(site.id) == site

    def test_ids_are_unique(self, store: InMemoryStore) -> None:
        fields = SiteCreate(name="A", location="x", latitude=0.0, longitude=0.0)
        ids = {store.create_site(fields).id for _ in range(20)}
        assert len(ids) == 20

    def test_list_sites_in_insertion_order(self, store: InMemoryStore) -> None:
        for name in ("first", "second", "third"):
            store.create_site(SiteCreate(name=name, location="x", latitude=0.0, longitude=0.0))
        assert [s.name for s in store.list_sites()] == ["first", "second", "third"]

    def test_get_unknown_site_is_none(self, store: InMemoryStore) -> None:
        assert store.get_site("missing") is None

    def test_update_site_status(self, store: InMemoryStore, murray_site) -> None:
        updated = store.update_site_status(murray_site.id, SiteStatus.MAINTENANCE, 40)
        assert updated is not None
        assert updated.status == SiteStatus.MAINTENANCE
        assert updated.health_score == 40
        assert updated.last_update > murray_site.last_update
        assert store.get_site(murray_site.id) == updated

    def test_update_unknown_site_is_noop(self, store: InMemoryStore) -> None:
        assert store.update_site_status("missing", SiteStatus.ONLINE, 100) is None
        assert store.list_sites() == []

    def test_returned_site_is_a_snapshot(self, store: InMemoryStore, murray_site) -> None:
        store.update_site_status(murray_site.id, SiteStatus.OFFLINE, 0)
        assert murray_site.status == SiteStatus.ONLINE


class TestReadings:
    """Reading creation and newest-first retrieval."""

    def test_missing_measurements_stored_as_none(self, store: InMemoryStore) -> None:
        reading = store.create_reading(ReadingCreate(site_id="s1", ph_level=7.0))
        assert reading.ph_level == 7.0
        assert reading.temperature is None
        assert reading.dissolved_oxygen is None
        assert reading.nitrates is None
        assert reading.turbidity is None

    def test_zero_measurement_is_not_nulled(self, store: InMemoryStore) -> None:
        reading = store.create_reading(make_reading("s1", nitrates=0.0, turbidity=0.0))
        assert reading.nitrates == 0.0
        assert reading.turbidity == 0.0

    def test_list_readings_newest_first(self, store: InMemoryStore) -> None:
        created = [store.create_reading(make_reading("s1", ph_level=7.0 + i / 10)) for i in range(5)]
        readings = store.list_readings("s1")
        assert [r.id for r in readings] == [r.id for r in reversed(created)]
        timestamps = [r.timestamp for r in readings]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_list_readings_filters_by_site_and_limits(self, store: InMemoryStore) -> None:
        for _ in range(4):
            store.create_reading(make_reading("s1"))
        store.create_reading(make_reading("s2"))

        assert len(store.list_readings("s1")) == 4
        assert len(store.list_readings("s1", limit=2)) == 2
        assert all(r.site_id == "s2" for r in store.list_readings("s2"))
        assert store.list_readings("unknown") == []

    def test_default_limit_is_fifty(self, store: InMemoryStore) -> None:
        for _ in range(60):
            store.create_reading(make_reading("s1"))
        assert len(store.list_readings("s1")) == 50

    def test_same_timestamp_newest_inserted_first(self) -> None:
        frozen = InMemoryStore(clock=lambda: datetime(2026, 1, 1, tzinfo=timezone.utc))
        first = frozen.create_reading(make_reading("s1"))
        second = frozen.create_reading(make_reading("s1"))
        assert [r.id for r in frozen.list_readings("s1")] == [second.id, first.id]

    def test_latest_reading(self, store: InMemoryStore) -> None:
        assert store.latest_reading("s1") is None
        store.create_reading(make_reading("s1"))
        newest = store.create_reading(make_reading("s1", ph_level=6.9))
        assert store.latest_reading("s1") == newest
        assert store.latest_reading("s1") == store.list_readings("s1", 1)[0]


class TestAlerts:
    """Alert defaults, priority grouping and dismissal."""

    def test_create_alert_defaults(self, store: InMemoryStore) -> None:
        alert = store.create_alert(
            AlertCreate(
                site_id="s1",
                title="Maintenance Reminder",
                description="Calibrate",
                priority=AlertPriority.LOW,
                alert_type=AlertType.MAINTENANCE,
            )
        )
        assert alert.is_active is True
        assert alert.confidence is None
        assert alert.eta is None
        assert alert.created_at is not None

    def test_create_inactive_alert(self, store: InMemoryStore) -> None:
        fields = make_alert("s1", AlertPriority.HIGH).model_copy(update={"is_active": False})
        alert = store.create_alert(fields)
        assert alert.is_active is False
        assert store.list_active_alerts() == []

    def test_active_alerts_grouped_by_priority(self, store: InMemoryStore) -> None:
        for priority in (
            AlertPriority.LOW,
            AlertPriority.HIGH,
            AlertPriority.MEDIUM,
            AlertPriority.LOW,
            AlertPriority.HIGH,
        ):
            store.create_alert(make_alert("s1", priority))

        ranks = [a.priority.rank for a in store.list_active_alerts()]
        assert len(ranks) == 5
        assert all(a >= b for a, b in zip(ranks, ranks[1:]))

    def test_alerts_for_site(self, store: InMemoryStore) -> None:
        store.create_alert(make_alert("s1", AlertPriority.HIGH))
        store.create_alert(make_alert("s2", AlertPriority.LOW))
        assert {a.site_id for a in store.alerts_for_site("s1")} == {"s1"}
        assert store.alerts_for_site("unknown") == []

    def test_dismiss_keeps_history(self, store: InMemoryStore) -> None:
        alert = store.create_alert(make_alert("s1", AlertPriority.HIGH))
        store.dismiss_alert(alert.id)

        assert alert.id not in {a.id for a in store.list_active_alerts()}
        history = store.alerts_for_site("s1")
        assert len(history) == 1
        assert history[0].id == alert.id
        assert history[0].is_active is False

    def test_dismiss_is_idempotent(self, store: InMemoryStore) -> None:
        alert = store.create_alert(make_alert("s1", AlertPriority.MEDIUM))
        store.dismiss_alert(alert.id)
        store.dismiss_alert(alert.id)
        assert store.get_alert(alert.id).is_active is False

    def test_dismiss_unknown_alert_does_not_raise(self, store: InMemoryStore) -> None:
        store.dismiss_alert("missing")

    def test_dismiss_only_changes_active_flag(self, store: InMemoryStore) -> None:
        alert = store.create_alert(make_alert("s1", AlertPriority.HIGH, title="Keep me"))
        store.dismiss_alert(alert.id)
        dismissed = store.get_alert(alert.id)
        assert dismissed.title == alert.title
        assert dismissed.priority == alert.priority
        assert dismissed.created_at == alert.created_at
