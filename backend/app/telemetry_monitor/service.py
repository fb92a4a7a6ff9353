"""TelemetryMonitor: evaluates sensor readings against zones and thresholds.

Flow per reading:
1. Find the prior reading for the tracking number
2. Persist the new reading
3. Emit a GeofenceAlert for every zone crossed since the prior reading
4. Temperature out of range: High "Temperature Breach" exception
5. Any Exited event: Medium "Geofence Exit" exception
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.config import Settings
from app.exceptions import NotFoundError, ValidationFailure
from app.models.alerts import AlertSeverity, ExceptionAlert, ExceptionType
from app.models.telemetry import GeofenceAlert, GeofenceEvent, IoTReading
from app.notifications.service import AlertService
from app.repositories.facts import normalize_tracking_number
from app.repositories.telemetry import GeofenceAlertRepository, IoTReadingRepository
from app.schemas.telemetry import TelemetryReadingRequest
from app.services.clock import SystemClock
from app.telemetry_monitor.geofence import detect_transitions, format_temperature, temperature_breached

logger = logging.getLogger("imk.telemetry_monitor")


@dataclass
class TelemetryOutcome:
    reading: IoTReading
    geofence_alerts: list[GeofenceAlert] = field(default_factory=list)
    exceptions: list[ExceptionAlert] = field(default_factory=list)

    @property
    def geofence_events(self) -> int:
        return len(self.geofence_alerts)

    @property
    def message(self) -> str:
        if self.geofence_alerts:
            return f"Telemetry saved with {len(self.geofence_alerts)} geofence event(s)."
        return "Telemetry saved."


class TelemetryMonitor:
    def __init__(self, settings: Settings, clock=None, alerts: AlertService | None = None):
        self.settings = settings
        self.clock = clock or SystemClock()
        self.alerts = alerts or AlertService(self.clock)

    async def ingest(self, db: AsyncSession, payload: TelemetryReadingRequest) -> TelemetryOutcome:
        tracking_number = normalize_tracking_number(payload.tracking_number)
        if not tracking_number:
            raise ValidationFailure("Tracking number is required.")

        readings = IoTReadingRepository(db)
        prior = await readings.latest_for(tracking_number)
        now = self.clock.now()

        reading = await readings.create(
            tracking_number=tracking_number,
            timestamp=now,
            lat=payload.lat,
            lng=payload.lng,
            temperature_c=payload.temperature_c,
            humidity_pct=payload.humidity_pct,
            shock_g=payload.shock_g,
            seal_open=payload.seal_open,
        )
        outcome = TelemetryOutcome(reading=reading)

        transitions = detect_transitions(
            (payload.lat, payload.lng),
            (prior.lat, prior.lng) if prior is not None else None,
        )
        geofence_repo = GeofenceAlertRepository(db)
        for transition in transitions:
            outcome.geofence_alerts.append(await geofence_repo.create(
                tracking_number=tracking_number,
                zone_name=transition.zone_name,
                event=GeofenceEvent(transition.event),
                timestamp=now,
                resolved=False,
            ))

        if temperature_breached(
            payload.temperature_c, self.settings.temperature_max_c, self.settings.temperature_min_c
        ):
            outcome.exceptions.append(await self.alerts.raise_exception(
                db,
                tracking_number=tracking_number,
                exception_type=ExceptionType.TEMPERATURE_BREACH,
                severity=AlertSeverity.HIGH,
                note=f"Temperature at {format_temperature(payload.temperature_c)}C exceeded threshold.",
            ))

        if any(alert.event == GeofenceEvent.EXITED for alert in outcome.geofence_alerts):
            outcome.exceptions.append(await self.alerts.raise_exception(
                db,
                tracking_number=tracking_number,
                exception_type=ExceptionType.GEOFENCE_EXIT,
                severity=AlertSeverity.MEDIUM,
            ))

        logger.info(
            "Reading %s for %s: %d geofence event(s), %d exception(s)",
            reading.id, tracking_number, outcome.geofence_events, len(outcome.exceptions),
        )
        await AuditService.record(
            db,
            event_type="TELEMETRY_RECORDED",
            entity_type="iot_reading",
            entity_ref=reading.id,
            new_state={
                "tracking_number": tracking_number,
                "geofence_events": [
                    {"zone": a.zone_name, "event": a.event.value} for a in outcome.geofence_alerts
                ],
                "exceptions": [e.id for e in outcome.exceptions],
            },
            occurred_at=now,
        )
        return outcome

    async def resolve_geofence_alert(self, db: AsyncSession, alert_id: str) -> GeofenceAlert:
        repo = GeofenceAlertRepository(db)
        alert = await repo.get(alert_id)
        if alert is None:
            raise NotFoundError(f"Geofence alert {alert_id} not found.")
        alert.resolved = True
        await repo.save(alert)
        await AuditService.record(
            db,
            event_type="GEOFENCE_ALERT_RESOLVED",
            entity_type="geofence_alert",
            entity_ref=alert.id,
            new_state={"resolved": True},
            occurred_at=self.clock.now(),
        )
        return alert

    async def list_geofence_alerts(
        self, db: AsyncSession, tracking_number: str | None = None, resolved: bool | None = None
    ) -> list[GeofenceAlert]:
        tracking_number = normalize_tracking_number(tracking_number) or None
        return await GeofenceAlertRepository(db).list_for(tracking_number, resolved)
