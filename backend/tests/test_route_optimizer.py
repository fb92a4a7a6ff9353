"""Tests for route optimization: pure scoring and RouteOptimizer service."""

import pytest

from app.exceptions import NotFoundError
from app.models.facts import ShipmentMode
from app.models.routing import RouteStrategy
from app.rate_engine.calculator import compare_rates
from app.route_optimizer.scoring import MAX_RISK_SCORE, pick_option, risk_score, score_option
from app.route_optimizer.service import RouteOptimizer


@pytest.fixture
def dubai_options():
    return compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)


class TestPickOption:
    def test_cost_picks_cheapest(self, dubai_options):
        assert pick_option(dubai_options, "Cost").mode == "Sea"

    def test_speed_picks_air(self, dubai_options):
        assert pick_option(dubai_options, "Speed").mode == "Air"

    def test_balanced_picks_road(self, dubai_options):
        assert pick_option(dubai_options, "Balanced").mode == "Road"

    def test_low_carbon_picks_sea(self, dubai_options):
        assert pick_option(dubai_options, "Low Carbon").mode == "Sea"

    def test_speed_score_formula(self, dubai_options):
        sea = dubai_options[0]
        assert score_option(sea, "Speed") == pytest.approx(11 * 600 + 1537.5 * 0.25)

    def test_empty_options_rejected(self):
        with pytest.raises(ValueError):
            pick_option([], "Cost")


class TestRiskScore:
    def test_base_plus_mode(self):
        assert risk_score("Low", "Sea") == 20
        assert risk_score("Medium", "Air") == 49
        assert risk_score("High", "Road") == 78

    def test_missing_risk_level_scores_low(self):
        assert risk_score(None, "Road") == 28

    def test_capped(self):
        for level in ("Low", "Medium", "High", None):
            for mode in ("Air", "Sea", "Road"):
                assert risk_score(level, mode) <= MAX_RISK_SCORE


class TestRouteOptimizer:
    @pytest.mark.asyncio
    async def test_optimize_persists_plan(self, seeded, clock):
        optimizer = RouteOptimizer(clock)
        plan = await optimizer.optimize(seeded, "imk-1001", RouteStrategy.COST)

        assert plan.id == "RTE-0001"
        assert plan.tracking_number == "IMK-1001"
        assert plan.recommended_mode == ShipmentMode.SEA
        assert plan.recommended_carrier == "Maersk"
        assert plan.estimated_cost_usd == pytest.approx(1537.5)
        assert plan.estimated_transit_days == 11
        assert plan.distance_km == 3670
        assert plan.risk_score == 20
        assert plan.carbon_kg == pytest.approx(256.9)

    @pytest.mark.asyncio
    async def test_high_risk_express_shipment(self, seeded, clock):
        optimizer = RouteOptimizer(clock)
        plan = await optimizer.optimize(seeded, "IMK-1002", RouteStrategy.SPEED)
        # 1200 kg Express over 8640 km: Road edges out Air on the speed score
        assert plan.recommended_mode == ShipmentMode.ROAD
        assert plan.risk_score == 78

    @pytest.mark.asyncio
    async def test_defaults_weight_and_volume_without_job(self, seeded, clock):
        plan = await RouteOptimizer(clock).optimize(seeded, "IMK-1003", RouteStrategy.COST)
        expected = compare_rates("Mombasa, Kenya", "Hargeisa, Somalia", 100, 1)[0]
        assert plan.estimated_cost_usd == expected.price_usd

    @pytest.mark.asyncio
    async def test_latest_plan_wins(self, seeded, clock):
        optimizer = RouteOptimizer(clock)
        await optimizer.optimize(seeded, "IMK-1001", RouteStrategy.COST)
        clock.advance(hours=1)
        second = await optimizer.optimize(seeded, "IMK-1001", RouteStrategy.SPEED)

        latest = await optimizer.latest_plan(seeded, "IMK-1001")
        assert latest.id == second.id == "RTE-0002"
        assert latest.recommended_mode == ShipmentMode.AIR

    @pytest.mark.asyncio
    async def test_unknown_shipment(self, seeded, clock):
        with pytest.raises(NotFoundError, match="Shipment not found."):
            await RouteOptimizer(clock).optimize(seeded, "IMK-9999", RouteStrategy.COST)

    @pytest.mark.asyncio
    async def test_no_plan_yet(self, seeded, clock):
        with pytest.raises(NotFoundError):
            await RouteOptimizer(clock).latest_plan(seeded, "IMK-1001")
