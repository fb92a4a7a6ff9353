"""Tests for predictive ETA: pure predictor and PredictiveEtaService."""

from datetime import date

import pytest

from app.eta_engine.predictor import (
    DEFAULT_FACTOR,
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    confidence_for,
    predict_eta,
    risk_level_for,
)
from app.eta_engine.service import PredictiveEtaService
from app.exceptions import NotFoundError, ValidationFailure
from app.models.facts import RiskLevel
from app.repositories.routing import PredictiveEtaRepository

BASELINE = date(2026, 10, 25)


class TestPredictEta:
    def test_stable_shipment_keeps_baseline(self):
        result = predict_eta(BASELINE, risk_level="Low", shipment_status="In Transit", mode="Road")
        assert result.predicted_eta == BASELINE
        assert result.factors == [DEFAULT_FACTOR]
        assert result.confidence_pct == 92
        assert result.risk_level == "Low"

    def test_sea_records_weather_factor_without_offset(self):
        result = predict_eta(BASELINE, risk_level="Low", shipment_status="In Transit", mode="Sea")
        assert result.predicted_eta == BASELINE
        assert result.factors == ["Ocean lane weather variability"]

    def test_offsets_accumulate(self):
        result = predict_eta(
            BASELINE,
            risk_level="High",
            shipment_status="Customs",
            mode="Air",
            job_status="Delayed",
        )
        assert result.predicted_eta == date(2026, 10, 28)
        assert result.factors == [
            "High risk profile",
            "Order currently delayed",
            "Customs processing variability",
            "Air mode acceleration",
        ]
        assert result.confidence_pct == 66
        assert result.risk_level == "High"

    def test_medium_risk_in_customs(self):
        result = predict_eta(BASELINE, risk_level="Medium", shipment_status="Customs", mode="Road")
        assert result.confidence_pct == 82
        assert result.risk_level == "Medium"


class TestConfidence:
    def test_bounds_hold_for_all_inputs(self):
        for level in ("Low", "Medium", "High", None):
            for customs in (True, False):
                for delayed in (True, False):
                    value = confidence_for(level, customs, delayed)
                    assert MIN_CONFIDENCE <= value <= MAX_CONFIDENCE

    def test_risk_thresholds(self):
        assert risk_level_for(62) == "High"
        assert risk_level_for(74) == "High"
        assert risk_level_for(75) == "Medium"
        assert risk_level_for(85) == "Medium"
        assert risk_level_for(86) == "Low"
        assert risk_level_for(97) == "Low"


class TestPredictiveEtaService:
    @pytest.mark.asyncio
    async def test_refresh_uses_linked_job(self, seeded, clock):
        prediction = await PredictiveEtaService(clock).refresh(seeded, "imk-1002")
        # High risk +1, delayed job +2, customs +1, air -1
        assert prediction.predicted_eta == date(2026, 10, 23)
        assert prediction.confidence_pct == 66
        assert prediction.risk_level == RiskLevel.HIGH

    @pytest.mark.asyncio
    async def test_refresh_upserts(self, seeded, clock):
        service = PredictiveEtaService(clock)
        await service.refresh(seeded, "IMK-1001")
        clock.advance(hours=2)
        again = await service.refresh(seeded, "IMK-1001")

        assert await PredictiveEtaRepository(seeded).tracking_numbers() == {"IMK-1001"}
        stored = await service.get(seeded, "IMK-1001")
        assert stored is again
        assert stored.factors == ["Ocean lane weather variability"]

    @pytest.mark.asyncio
    async def test_unknown_shipment(self, seeded, clock):
        with pytest.raises(NotFoundError):
            await PredictiveEtaService(clock).refresh(seeded, "IMK-0000")

    @pytest.mark.asyncio
    async def test_missing_baseline(self, seeded, clock):
        with pytest.raises(ValidationFailure):
            await PredictiveEtaService(clock).refresh(seeded, "IMK-1003")

    @pytest.mark.asyncio
    async def test_refresh_missing_skips_known_and_undated(self, seeded, clock):
        service = PredictiveEtaService(clock)
        await service.refresh(seeded, "IMK-1001")

        created = await service.refresh_missing(seeded)
        assert [p.tracking_number for p in created] == ["IMK-1002"]
        assert await service.refresh_missing(seeded) == []

    @pytest.mark.asyncio
    async def test_get_without_prediction(self, seeded, clock):
        with pytest.raises(NotFoundError):
            await PredictiveEtaService(clock).get(seeded, "IMK-1001")
