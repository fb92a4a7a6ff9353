"""Pydantic schemas for route plans and predictive ETAs."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from app.models.facts import RiskLevel, ShipmentMode
from app.models.routing import RouteStrategy


class RouteOptimizeRequest(BaseModel):
    tracking_number: str = Field(min_length=1)
    strategy: RouteStrategy = RouteStrategy.BALANCED


class RoutePlanResponse(BaseModel):
    id: str
    tracking_number: str
    origin: str
    destination: str
    strategy: RouteStrategy
    recommended_mode: ShipmentMode
    recommended_carrier: str
    estimated_transit_days: int
    estimated_cost_usd: float
    distance_km: float
    risk_score: int
    carbon_kg: float
    created_at: datetime

    model_config = {"from_attributes": True}


class PredictiveEtaResponse(BaseModel):
    tracking_number: str
    predicted_eta: date
    confidence_pct: int
    risk_level: RiskLevel
    factors: list[str]
    updated_at: datetime

    model_config = {"from_attributes": True}


class PredictiveEtaListResponse(BaseModel):
    predictions: list[PredictiveEtaResponse]
    total: int
