"""RateComparisonService: binds the pure calculator to the injected clock."""

import logging

from app.rate_engine.calculator import RateOption, compare_rates, demand_factor_for
from app.services.clock import SystemClock

logger = logging.getLogger("imk.rate_engine")


class RateComparisonService:
    def __init__(self, clock=None):
        self.clock = clock or SystemClock()

    def current_demand_factor(self) -> float:
        return demand_factor_for(self.clock.now().date())

    def quote(
        self,
        origin: str,
        destination: str,
        weight_kg: float,
        volume_cbm: float,
        service_type: str = "Standard",
    ) -> list[RateOption]:
        demand_factor = self.current_demand_factor()
        options = compare_rates(
            origin,
            destination,
            weight_kg,
            volume_cbm,
            service_type,
            demand_factor=demand_factor,
        )
        logger.debug(
            "Quoted %s -> %s (%.1f kg, %.2f cbm, %s, demand x%.2f)",
            origin, destination, weight_kg, volume_cbm, service_type, demand_factor,
        )
        return options
