"""Pure route scoring: strategy weighting over rate options."""

from collections.abc import Callable

from app.rate_engine.calculator import RateOption

MAX_RISK_SCORE = 95

STRATEGY_SCORES: dict[str, Callable[[RateOption], float]] = {
    "Cost": lambda o: o.price_usd,
    "Speed": lambda o: o.transit_days * 600 + o.price_usd * 0.25,
    "Balanced": lambda o: o.price_usd * 0.55 + o.transit_days * 220,
    "Low Carbon": lambda o: o.co2_kg * 2.5 + o.price_usd * 0.30,
}

RISK_BASE = {"High": 70, "Medium": 45, "Low": 20}
MODE_RISK_ADJUSTMENT = {"Road": 8, "Air": 4, "Sea": 0}


def score_option(option: RateOption, strategy: str) -> float:
    return STRATEGY_SCORES[strategy](option)


def pick_option(options: list[RateOption], strategy: str) -> RateOption:
    """Lowest score wins. sorted() is stable, so ties keep the price order."""
    if not options:
        raise ValueError("No rate options to choose from")
    return sorted(options, key=lambda o: score_option(o, strategy))[0]


def risk_score(risk_level: str | None, mode: str) -> int:
    """Shipment risk base plus a mode adjustment, capped at 95.

    A shipment with no recorded risk level scores as Low.
    """
    base = RISK_BASE.get(risk_level or "Low", RISK_BASE["Low"])
    return min(MAX_RISK_SCORE, base + MODE_RISK_ADJUSTMENT.get(mode, 0))
