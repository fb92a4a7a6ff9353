"""CarrierSyncService: simulated carrier API sync and milestone events."""

import logging
import random
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.carrier_sync.health import api_status_for, drift_success_rate
from app.exceptions import NotFoundError, ValidationFailure
from app.models.carriers import CarrierApiStatus, CarrierConnection, CarrierEvent
from app.repositories.carriers import CarrierEventRepository, CarrierRepository
from app.repositories.facts import normalize_tracking_number
from app.services.clock import SystemClock

logger = logging.getLogger("imk.carrier_sync")


class CarrierSyncService:
    def __init__(self, clock=None, rng: random.Random | None = None):
        self.clock = clock or SystemClock()
        self.rng = rng or random.Random()

    async def list_carriers(self, db: AsyncSession) -> list[CarrierConnection]:
        return await CarrierRepository(db).all()

    async def refresh_sync(self, db: AsyncSession, carrier_id: str) -> CarrierConnection:
        repo = CarrierRepository(db)
        await repo.lock()
        carrier = await repo.get_for_update(carrier_id)
        if carrier is None:
            raise NotFoundError(f"Carrier {carrier_id} not found.")
        previous_status = carrier.api_status
        carrier.success_rate_pct = drift_success_rate(carrier.success_rate_pct, self.rng.random())
        carrier.api_status = CarrierApiStatus(api_status_for(carrier.success_rate_pct))
        carrier.last_sync_at = self.clock.now()
        await repo.save(carrier)

        if carrier.api_status != previous_status:
            logger.warning(
                "Carrier %s API status %s -> %s (%.2f%%)",
                carrier.name, previous_status.value, carrier.api_status.value, carrier.success_rate_pct,
            )
        await AuditService.record(
            db,
            event_type="CARRIER_SYNCED",
            entity_type="carrier_connection",
            entity_ref=carrier.id,
            new_state={
                "success_rate_pct": carrier.success_rate_pct,
                "api_status": carrier.api_status.value,
            },
            occurred_at=carrier.last_sync_at,
        )
        return carrier

    async def add_event(
        self,
        db: AsyncSession,
        *,
        tracking_number: str,
        carrier_id: str,
        event: str,
        location: str,
        eta: date | None = None,
    ) -> CarrierEvent:
        tracking_number = normalize_tracking_number(tracking_number)
        if not tracking_number or not event.strip() or not location.strip():
            raise ValidationFailure("Tracking number, carrier, event, and location are required.")
        if await CarrierRepository(db).get(carrier_id) is None:
            raise NotFoundError(f"Carrier {carrier_id} not found.")

        record = await CarrierEventRepository(db).create(
            tracking_number=tracking_number,
            carrier_id=carrier_id,
            event=event.strip(),
            location=location.strip(),
            timestamp=self.clock.now(),
            eta=eta,
        )
        logger.info("Carrier event %s recorded for %s", record.id, tracking_number)
        await AuditService.record(
            db,
            event_type="CARRIER_EVENT_RECORDED",
            entity_type="carrier_event",
            entity_ref=record.id,
            new_state={
                "tracking_number": tracking_number,
                "carrier_id": carrier_id,
                "event": record.event,
                "location": record.location,
            },
            occurred_at=record.timestamp,
        )
        return record

    async def list_events(self, db: AsyncSession, tracking_number: str) -> list[CarrierEvent]:
        return await CarrierEventRepository(db).list_for(normalize_tracking_number(tracking_number))
