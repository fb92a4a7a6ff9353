"""Tests for telemetry: pure geofence math and TelemetryMonitor service."""

import pytest

from app.config import Settings
from app.exceptions import NotFoundError, ValidationFailure
from app.models.alerts import AlertSeverity, ExceptionType
from app.models.telemetry import GeofenceEvent
from app.reference_data.tables import GEOFENCE_ZONES
from app.repositories.alerts import ExceptionAlertRepository
from app.schemas.telemetry import TelemetryReadingRequest
from app.telemetry_monitor.geofence import (
    detect_transitions,
    haversine_km,
    is_inside,
    temperature_breached,
)
from app.telemetry_monitor.service import TelemetryMonitor

GATEWAY = (-1.283, 36.817)  # Nairobi Gateway Warehouse centre
OPEN_ROAD = (0.0, 40.0)     # outside every zone


class TestHaversine:
    def test_zero_distance(self):
        assert haversine_km(2.041, 45.319, 2.041, 45.319) == 0

    def test_one_degree_of_latitude(self):
        assert haversine_km(0, 0, 1, 0) == pytest.approx(111.19, abs=0.01)

    def test_symmetric(self):
        assert haversine_km(*GATEWAY, *OPEN_ROAD) == pytest.approx(haversine_km(*OPEN_ROAD, *GATEWAY))


class TestTransitions:
    def test_first_reading_is_silent(self):
        assert detect_transitions(GATEWAY, None) == []

    def test_entering_a_zone(self):
        transitions = detect_transitions(GATEWAY, OPEN_ROAD)
        assert [(t.zone_name, t.event) for t in transitions] == [
            ("Nairobi Gateway Warehouse", "Entered"),
        ]

    def test_exiting_a_zone(self):
        transitions = detect_transitions(OPEN_ROAD, GATEWAY)
        assert [(t.zone_name, t.event) for t in transitions] == [
            ("Nairobi Gateway Warehouse", "Exited"),
        ]

    def test_staying_inside_is_silent(self):
        assert detect_transitions(GATEWAY, (-1.284, 36.818)) == []

    def test_zone_centre_is_inside(self):
        zone = GEOFENCE_ZONES[0]
        assert is_inside(zone.lat, zone.lng, zone)


class TestTemperature:
    def test_thresholds_are_exclusive(self):
        assert not temperature_breached(30)
        assert not temperature_breached(2)
        assert temperature_breached(30.1)
        assert temperature_breached(1.9)


def _reading(position, temperature=12.0, tracking_number="IMK-1002"):
    return TelemetryReadingRequest(
        tracking_number=tracking_number,
        lat=position[0],
        lng=position[1],
        temperature_c=temperature,
        humidity_pct=55,
        shock_g=0.2,
    )


class TestTelemetryMonitor:
    @pytest.mark.asyncio
    async def test_temperature_breach_raises_high_exception(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(), clock, alert_service)
        outcome = await monitor.ingest(seeded, _reading(OPEN_ROAD, temperature=35))

        assert outcome.geofence_events == 0
        assert outcome.message == "Telemetry saved."
        assert len(outcome.exceptions) == 1
        alert = outcome.exceptions[0]
        assert alert.type == ExceptionType.TEMPERATURE_BREACH
        assert alert.severity == AlertSeverity.HIGH
        assert alert.note == "Temperature at 35C exceeded threshold."

    @pytest.mark.asyncio
    async def test_crossing_a_boundary(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(), clock, alert_service)

        first = await monitor.ingest(seeded, _reading(OPEN_ROAD))
        assert first.geofence_events == 0

        clock.advance(minutes=10)
        entered = await monitor.ingest(seeded, _reading(GATEWAY))
        assert entered.geofence_events == 1
        assert entered.geofence_alerts[0].event == GeofenceEvent.ENTERED
        assert entered.message == "Telemetry saved with 1 geofence event(s)."
        assert entered.exceptions == []

        clock.advance(minutes=10)
        exited = await monitor.ingest(seeded, _reading(OPEN_ROAD))
        assert exited.geofence_alerts[0].event == GeofenceEvent.EXITED
        assert [e.type for e in exited.exceptions] == [ExceptionType.GEOFENCE_EXIT]
        assert exited.exceptions[0].severity == AlertSeverity.MEDIUM

    @pytest.mark.asyncio
    async def test_first_reading_inside_zone_is_silent(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(), clock, alert_service)
        outcome = await monitor.ingest(seeded, _reading(GATEWAY))
        assert outcome.geofence_events == 0
        assert outcome.reading.id == "IOT-0001"

    @pytest.mark.asyncio
    async def test_prior_reading_is_per_tracking_number(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(), clock, alert_service)
        await monitor.ingest(seeded, _reading(OPEN_ROAD, tracking_number="IMK-1001"))
        clock.advance(minutes=1)
        outcome = await monitor.ingest(seeded, _reading(GATEWAY, tracking_number="IMK-1002"))
        assert outcome.geofence_events == 0

    @pytest.mark.asyncio
    async def test_blank_tracking_number_rejected(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(), clock, alert_service)
        with pytest.raises(ValidationFailure, match="Tracking number is required."):
            await monitor.ingest(seeded, _reading(OPEN_ROAD, tracking_number="   "))

    @pytest.mark.asyncio
    async def test_resolve_geofence_alert(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(), clock, alert_service)
        await monitor.ingest(seeded, _reading(OPEN_ROAD))
        clock.advance(minutes=5)
        entered = await monitor.ingest(seeded, _reading(GATEWAY))

        resolved = await monitor.resolve_geofence_alert(seeded, entered.geofence_alerts[0].id)
        assert resolved.resolved is True
        assert await monitor.list_geofence_alerts(seeded, "IMK-1002", resolved=False) == []

        with pytest.raises(NotFoundError):
            await monitor.resolve_geofence_alert(seeded, "GFA-9999")

    @pytest.mark.asyncio
    async def test_thresholds_come_from_settings(self, seeded, clock, alert_service):
        monitor = TelemetryMonitor(Settings(temperature_max_c=8.0), clock, alert_service)
        await monitor.ingest(seeded, _reading(OPEN_ROAD, temperature=12.0))
        alerts = await ExceptionAlertRepository(seeded).list_for("IMK-1002")
        assert [a.type for a in alerts] == [ExceptionType.TEMPERATURE_BREACH]
