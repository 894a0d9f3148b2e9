"""Tests for the real-time event envelope."""

from __future__ import annotations

import json

import pytest

from src.telemetry.domain import events
from src.telemetry.domain.exceptions import MalformedEventError
from src.telemetry.domain.models import AlertPriority, SiteStatus
from src.telemetry.infrastructure.memory_store import InMemoryStore
from tests.helpers.doubles import make_alert, make_reading


class TestSerialization:
    def test_sensor_update_wire_shape(self, store: InMemoryStore) -> None:
        reading = store.create_reading(make_reading("s1"))
        payload = json.loads(events.serialize_event(events.sensor_update(reading)))

        assert payload["type"] == "sensor_update"
        assert payload["data"]["siteId"] == "s1"
        assert set(payload["data"]["readings"]) == {
            "phLevel",
            "temperature",
            "dissolvedOxygen",
            "nitrates",
            "turbidity",
        }

    def test_site_status_update_wire_shape(self) -> None:
        payload = json.loads(
            events.serialize_event(events.site_status_update("s1", SiteStatus.ONLINE, 85))
        )
        assert payload == {
            "type": "site_status_update",
            "data": {"siteId": "s1", "status": "online", "healthScore": 85},
        }

    def test_alert_created_carries_full_record(self, store: InMemoryStore) -> None:
        alert = store.create_alert(make_alert("s1", AlertPriority.HIGH, title="High Nitrate Alert"))
        payload = json.loads(events.serialize_event(events.alert_created(alert)))

        data = payload["data"]
        assert payload["type"] == "alert_created"
        assert data["id"] == alert.id
        assert data["siteId"] == "s1"
        assert data["priority"] == "high"
        assert data["alertType"] == "anomaly"
        assert data["isActive"] is True
        assert data["confidence"] is None
        assert "createdAt" in data


class TestParsing:
    def test_round_trip_preserves_type(self) -> None:
        event = events.site_status_update("s1", SiteStatus.OFFLINE, 0)
        parsed = events.parse_event(events.serialize_event(event))
        assert isinstance(parsed, events.SiteStatusUpdateEvent)
        assert parsed.data.status == SiteStatus.OFFLINE

    def test_parse_accepts_bytes(self) -> None:
        raw = b'{"type": "site_status_update", "data": {"siteId": "s1", "status": "online", "healthScore": 70}}'
        parsed = events.parse_event(raw)
        assert parsed.data.health_score == 70

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "{}",
            '{"type": "unknown_event", "data": {}}',
            '{"type": "sensor_update", "data": {"siteId": "s1"}}',
            '{"type": "site_status_update", "data": {"siteId": "s1", "status": "broken", "healthScore": 1}}',
        ],
    )
    def test_malformed_payloads_raise(self, raw: str) -> None:
        with pytest.raises(MalformedEventError):
            events.parse_event(raw)
