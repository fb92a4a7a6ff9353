"""RouteOptimizer: recommends a mode/carrier for a shipment under a strategy.

Flow:
1. Look up the shipment and its cargo job (weight/volume default 100 kg / 1 cbm)
2. Price every mode through the rate engine
3. Pick the minimum-score option for the strategy
4. Derive distance, risk score and carbon, append a RoutePlan
5. Log audit event
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.exceptions import NotFoundError
from app.models.facts import ShipmentMode
from app.models.routing import RoutePlan, RouteStrategy
from app.rate_engine.service import RateComparisonService
from app.reference_data.tables import estimate_distance_km
from app.repositories.facts import FactStore, normalize_tracking_number
from app.repositories.routing import RoutePlanRepository
from app.route_optimizer.scoring import pick_option, risk_score
from app.services.clock import SystemClock

logger = logging.getLogger("imk.route_optimizer")

DEFAULT_WEIGHT_KG = 100.0
DEFAULT_VOLUME_CBM = 1.0


class RouteOptimizer:
    def __init__(self, clock=None):
        self.clock = clock or SystemClock()
        self.rates = RateComparisonService(self.clock)

    async def optimize(
        self, db: AsyncSession, tracking_number: str, strategy: RouteStrategy
    ) -> RoutePlan:
        tracking_number = normalize_tracking_number(tracking_number)
        facts = FactStore(db)
        shipment = await facts.get_shipment(tracking_number)
        if shipment is None:
            raise NotFoundError("Shipment not found.")

        job = await facts.get_cargo_job(tracking_number)
        weight_kg = job.weight_kg if job and job.weight_kg else DEFAULT_WEIGHT_KG
        volume_cbm = job.volume_cbm if job and job.volume_cbm else DEFAULT_VOLUME_CBM
        service_type = shipment.service_type.value if shipment.service_type else "Standard"

        options = self.rates.quote(
            shipment.origin, shipment.destination, weight_kg, volume_cbm, service_type
        )
        winner = pick_option(options, strategy.value)
        risk_level = shipment.risk_level.value if shipment.risk_level else None

        plan = await RoutePlanRepository(db).create(
            tracking_number=tracking_number,
            origin=shipment.origin,
            destination=shipment.destination,
            strategy=strategy,
            recommended_mode=ShipmentMode(winner.mode),
            recommended_carrier=winner.carrier,
            estimated_transit_days=winner.transit_days,
            estimated_cost_usd=winner.price_usd,
            distance_km=estimate_distance_km(shipment.origin, shipment.destination),
            risk_score=risk_score(risk_level, winner.mode),
            carbon_kg=winner.co2_kg,
            created_at=self.clock.now(),
        )
        logger.info(
            "Route optimized for %s (%s): %s via %s, $%.2f, risk %d",
            tracking_number, strategy.value, winner.mode, winner.carrier,
            winner.price_usd, plan.risk_score,
        )

        await AuditService.record(
            db,
            event_type="ROUTE_OPTIMIZED",
            entity_type="route_plan",
            entity_ref=plan.id,
            new_state={
                "tracking_number": tracking_number,
                "strategy": strategy.value,
                "recommended_mode": winner.mode,
                "recommended_carrier": winner.carrier,
                "estimated_cost_usd": winner.price_usd,
                "risk_score": plan.risk_score,
            },
            occurred_at=plan.created_at,
        )
        return plan

    async def latest_plan(self, db: AsyncSession, tracking_number: str) -> RoutePlan:
        plan = await RoutePlanRepository(db).latest_for(normalize_tracking_number(tracking_number))
        if plan is None:
            raise NotFoundError("No route plan recorded for this shipment.")
        return plan
