"""PredictiveEtaService: computes and upserts the live ETA per shipment."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.eta_engine.predictor import predict_eta
from app.exceptions import NotFoundError, ValidationFailure
from app.models.facts import RiskLevel, Shipment
from app.models.routing import PredictiveEta
from app.repositories.facts import FactStore, normalize_tracking_number
from app.repositories.routing import PredictiveEtaRepository
from app.services.clock import SystemClock

logger = logging.getLogger("imk.eta_engine")


class PredictiveEtaService:
    def __init__(self, clock=None):
        self.clock = clock or SystemClock()

    async def refresh(self, db: AsyncSession, tracking_number: str) -> PredictiveEta:
        tracking_number = normalize_tracking_number(tracking_number)
        shipment = await FactStore(db).get_shipment(tracking_number)
        if shipment is None:
            raise NotFoundError("Shipment not found.")
        return await self._refresh_shipment(db, shipment)

    async def refresh_missing(self, db: AsyncSession) -> list[PredictiveEta]:
        """Predict every shipment that has a baseline ETA but no live prediction yet."""
        known = await PredictiveEtaRepository(db).tracking_numbers()
        refreshed = []
        for shipment in await FactStore(db).list_shipments():
            if shipment.tracking_number in known or shipment.eta is None:
                continue
            refreshed.append(await self._refresh_shipment(db, shipment))
        logger.info("Bulk ETA refresh computed %d prediction(s)", len(refreshed))
        return refreshed

    async def get(self, db: AsyncSession, tracking_number: str) -> PredictiveEta:
        prediction = await PredictiveEtaRepository(db).get(normalize_tracking_number(tracking_number))
        if prediction is None:
            raise NotFoundError("No ETA prediction for this shipment.")
        return prediction

    async def _refresh_shipment(self, db: AsyncSession, shipment: Shipment) -> PredictiveEta:
        if shipment.eta is None:
            raise ValidationFailure("Shipment has no baseline ETA.")

        job = await FactStore(db).get_cargo_job(shipment.tracking_number)
        result = predict_eta(
            shipment.eta,
            risk_level=shipment.risk_level.value if shipment.risk_level else None,
            shipment_status=shipment.status.value,
            mode=shipment.mode.value if shipment.mode else None,
            job_status=job.status.value if job else None,
        )

        prediction = await PredictiveEtaRepository(db).upsert(PredictiveEta(
            tracking_number=shipment.tracking_number,
            predicted_eta=result.predicted_eta,
            confidence_pct=result.confidence_pct,
            risk_level=RiskLevel(result.risk_level),
            factors=result.factors,
            updated_at=self.clock.now(),
        ))
        logger.info(
            "ETA for %s: %s (%d%% confidence, %s risk)",
            shipment.tracking_number, result.predicted_eta, result.confidence_pct, result.risk_level,
        )

        await AuditService.record(
            db,
            event_type="ETA_PREDICTED",
            entity_type="predictive_eta",
            entity_ref=shipment.tracking_number,
            new_state={
                "predicted_eta": result.predicted_eta.isoformat(),
                "confidence_pct": result.confidence_pct,
                "risk_level": result.risk_level,
                "factors": result.factors,
            },
            occurred_at=prediction.updated_at,
        )
        return prediction
