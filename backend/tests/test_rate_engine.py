"""Tests for rate comparison: pure calculator and clock-bound service."""

from datetime import date, datetime, timezone

import pytest

from app.rate_engine.calculator import (
    MIN_TRANSIT_DAYS,
    compare_rates,
    demand_factor_for,
    round_half_up,
)
from app.rate_engine.service import RateComparisonService
from app.reference_data.tables import (
    DEFAULT_DISTANCE_KM,
    MODE_COEFFICIENTS,
    ModeCoefficients,
    estimate_distance_km,
)
from app.services.clock import FixedClock


class TestDistanceLookup:
    def test_known_lane(self):
        assert estimate_distance_km("Dubai, UAE", "Mogadishu, Somalia") == 3670

    def test_lane_is_directional(self):
        assert estimate_distance_km("Mogadishu, Somalia", "Dubai, UAE") == DEFAULT_DISTANCE_KM

    def test_unknown_lane_falls_back(self):
        assert estimate_distance_km("Berbera", "Djibouti") == 2400


class TestCompareRates:
    """Dubai → Mogadishu, 500 kg / 3 cbm, Standard, no surge."""

    def test_sorted_by_price_with_sea_cheapest(self):
        options = compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)
        assert [o.mode for o in options] == ["Sea", "Road", "Air"]
        prices = [o.price_usd for o in options]
        assert prices == sorted(prices)

    def test_prices_and_transit_days(self):
        by_mode = {o.mode: o for o in compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)}
        assert by_mode["Sea"].price_usd == pytest.approx(1537.5)
        assert by_mode["Road"].price_usd == pytest.approx(1708.6)
        assert by_mode["Air"].price_usd == pytest.approx(3960.4)
        assert by_mode["Sea"].transit_days == 11
        assert by_mode["Road"].transit_days == 8
        assert by_mode["Air"].transit_days == 6

    def test_co2_and_carrier(self):
        by_mode = {o.mode: o for o in compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)}
        assert by_mode["Sea"].co2_kg == pytest.approx(256.9)
        assert by_mode["Air"].co2_kg == pytest.approx(1064.3)
        assert by_mode["Sea"].carrier == "Maersk"
        assert by_mode["Air"].best_for == "Urgent and high-value cargo"

    def test_option_id_encodes_inputs(self):
        sea = compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)[0]
        assert sea.id == "Sea-3670-500-3"

    def test_express_multiplier_and_one_day_faster(self):
        standard = {o.mode: o for o in compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)}
        express = {
            o.mode: o
            for o in compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3, "Express")
        }
        assert express["Sea"].price_usd == pytest.approx(1537.5 * 1.23, abs=0.01)
        assert express["Sea"].transit_days == standard["Sea"].transit_days - 1

    def test_demand_factor_scales_price_only(self):
        base = compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3)
        surged = compare_rates("Dubai, UAE", "Mogadishu, Somalia", 500, 3, demand_factor=1.07)
        for b, s in zip(base, surged):
            assert s.price_usd == pytest.approx(b.price_usd * 1.07, abs=0.01)
            assert s.transit_days == b.transit_days
            assert s.co2_kg == b.co2_kg

    def test_sea_never_above_air(self):
        for weight, volume in [(1, 0.01), (100, 1), (5000, 40), (25000, 70)]:
            for origin, destination in [
                ("Dubai, UAE", "Mogadishu, Somalia"),
                ("Guangzhou, China", "Nairobi, Kenya"),
                ("Nowhere", "Elsewhere"),
            ]:
                by_mode = {o.mode: o for o in compare_rates(origin, destination, weight, volume)}
                assert by_mode["Sea"].price_usd <= by_mode["Air"].price_usd


class TestTransitFloor:
    def test_floor_applies_to_fast_modes(self):
        fast = {
            "Air": ModeCoefficients(
                base=100, weight_factor=1, volume_factor=1, distance_factor=0.01,
                base_days=1, co2_per_ton_km=0.5, carrier="Test Air", best_for="Tests",
            ),
        }
        option = compare_rates(
            "Mombasa, Kenya", "Hargeisa, Somalia", 10, 1, "Express", coefficients=fast
        )[0]
        assert option.transit_days == MIN_TRANSIT_DAYS

    def test_all_reference_options_respect_floor(self):
        for service_type in ("Standard", "Express"):
            options = compare_rates("Mombasa, Kenya", "Hargeisa, Somalia", 1, 0.1, service_type)
            assert all(o.transit_days >= 2 for o in options)
            assert len(options) == len(MODE_COEFFICIENTS)


class TestRounding:
    def test_half_up(self):
        assert round_half_up(4.5) == 5
        assert round_half_up(2.5) == 3
        assert round_half_up(10.835) == 11
        assert round_half_up(7.49) == 7


class TestDemandFactor:
    def test_weekdays_have_no_surge(self):
        # 2026-10-12 is a Monday
        for day in range(12, 16):
            assert demand_factor_for(date(2026, 10, day)) == 1.0

    def test_friday_to_sunday_surge(self):
        for day in (16, 17, 18):
            assert demand_factor_for(date(2026, 10, day)) == 1.07


class TestRateComparisonService:
    def test_uses_clock_date_for_surge(self):
        friday = RateComparisonService(FixedClock(datetime(2026, 10, 16, 23, 0, tzinfo=timezone.utc)))
        wednesday = RateComparisonService(FixedClock(datetime(2026, 10, 14, 9, 0, tzinfo=timezone.utc)))

        assert friday.current_demand_factor() == 1.07
        assert wednesday.current_demand_factor() == 1.0

        sea_friday = friday.quote("Dubai, UAE", "Mogadishu, Somalia", 500, 3)[0]
        sea_wednesday = wednesday.quote("Dubai, UAE", "Mogadishu, Somalia", 500, 3)[0]
        assert sea_friday.price_usd == pytest.approx(sea_wednesday.price_usd * 1.07, abs=0.01)
