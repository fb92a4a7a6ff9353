"""Pydantic schemas for telemetry readings and geofence alerts."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.telemetry import GeofenceEvent


class TelemetryReadingRequest(BaseModel):
    tracking_number: str
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    temperature_c: float
    humidity_pct: float = Field(default=0.0, ge=0, le=100)
    shock_g: float = Field(default=0.0, ge=0)
    seal_open: bool = False


class IoTReadingResponse(BaseModel):
    id: str
    tracking_number: str
    timestamp: datetime
    lat: float
    lng: float
    temperature_c: float
    humidity_pct: float
    shock_g: float
    seal_open: bool

    model_config = {"from_attributes": True}


class GeofenceAlertResponse(BaseModel):
    id: str
    tracking_number: str
    zone_name: str
    event: GeofenceEvent
    timestamp: datetime
    resolved: bool

    model_config = {"from_attributes": True}


class TelemetryIngestResponse(BaseModel):
    reading: IoTReadingResponse
    geofence_events: int
    geofence_alerts: list[GeofenceAlertResponse]
    exception_ids: list[str]
    message: str


class GeofenceZoneResponse(BaseModel):
    id: str
    name: str
    lat: float
    lng: float
    radius_km: float

    model_config = {"from_attributes": True}
