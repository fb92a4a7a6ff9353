"""Pydantic schemas for rate comparison."""

from pydantic import BaseModel, Field

from app.models.facts import ServiceType


class RateCompareRequest(BaseModel):
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    weight_kg: float = Field(gt=0)
    volume_cbm: float = Field(gt=0)
    service_type: ServiceType = ServiceType.STANDARD


class RateOptionResponse(BaseModel):
    id: str
    mode: str
    carrier: str
    transit_days: int
    price_usd: float
    co2_kg: float
    best_for: str

    model_config = {"from_attributes": True}


class RateCompareResponse(BaseModel):
    options: list[RateOptionResponse]
    demand_factor: float
