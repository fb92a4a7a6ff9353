"""Pydantic schemas for carrier connections and carrier events."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from app.models.carriers import CarrierApiStatus, CarrierMode


class CarrierConnectionResponse(BaseModel):
    id: str
    name: str
    mode: CarrierMode
    api_status: CarrierApiStatus
    last_sync_at: datetime
    success_rate_pct: float
    coverage: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class CarrierEventRequest(BaseModel):
    tracking_number: str
    carrier_id: str
    event: str
    location: str
    eta: date | None = None


class CarrierEventResponse(BaseModel):
    id: str
    tracking_number: str
    carrier_id: str
    event: str
    location: str
    timestamp: datetime
    eta: date | None = None

    model_config = {"from_attributes": True}
