"""Pure rate comparison: no DB dependency, easy to unit test.

Prices one option per transport mode for an origin/destination/weight/volume
tuple and returns them cheapest first.
"""

import math
from dataclasses import dataclass
from datetime import date

from app.reference_data.tables import MODE_COEFFICIENTS, ModeCoefficients, estimate_distance_km

EXPRESS_MULTIPLIER = 1.23
WEEKEND_SURGE = 1.07
# Friday, Saturday, Sunday
SURGE_WEEKDAYS = (4, 5, 6)
MIN_TRANSIT_DAYS = 2


@dataclass(frozen=True)
class RateOption:
    id: str
    mode: str
    carrier: str
    transit_days: int
    price_usd: float
    co2_kg: float
    best_for: str


def round2(value: float) -> float:
    return round(value, 2)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def demand_factor_for(day: date) -> float:
    """Weekend surge: 1.07 on Friday through Sunday, otherwise 1."""
    return WEEKEND_SURGE if day.weekday() in SURGE_WEEKDAYS else 1.0


def price_mode(
    mode: str,
    cfg: ModeCoefficients,
    distance_km: float,
    weight_kg: float,
    volume_cbm: float,
    express: bool,
    demand_factor: float,
) -> RateOption:
    service_multiplier = EXPRESS_MULTIPLIER if express else 1.0
    price = (
        cfg.base
        + weight_kg * cfg.weight_factor
        + volume_cbm * cfg.volume_factor
        + distance_km * cfg.distance_factor
    ) * service_multiplier * demand_factor
    transit_days = max(
        MIN_TRANSIT_DAYS,
        round_half_up(cfg.base_days + distance_km / 2000 - (1 if express else 0)),
    )
    return RateOption(
        id=f"{mode}-{distance_km:g}-{weight_kg:g}-{volume_cbm:g}",
        mode=mode,
        carrier=cfg.carrier,
        transit_days=transit_days,
        price_usd=round2(price),
        co2_kg=round2((weight_kg / 1000) * distance_km * cfg.co2_per_ton_km),
        best_for=cfg.best_for,
    )


def compare_rates(
    origin: str,
    destination: str,
    weight_kg: float,
    volume_cbm: float,
    service_type: str = "Standard",
    *,
    demand_factor: float = 1.0,
    coefficients: dict[str, ModeCoefficients] | None = None,
) -> list[RateOption]:
    """Price Air, Sea and Road for the lane, sorted ascending by price.

    Assumes weight and volume were validated as positive by the caller.
    """
    coefficients = coefficients or MODE_COEFFICIENTS
    distance_km = estimate_distance_km(origin, destination)
    express = service_type == "Express"

    options = [
        price_mode(mode, cfg, distance_km, weight_kg, volume_cbm, express, demand_factor)
        for mode, cfg in coefficients.items()
    ]
    return sorted(options, key=lambda o: o.price_usd)
