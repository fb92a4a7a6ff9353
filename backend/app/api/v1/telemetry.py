"""Telemetry endpoints: ingest readings, list zones and geofence alerts."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db, get_telemetry_monitor
from app.reference_data.tables import GEOFENCE_ZONES
from app.schemas.telemetry import (
    GeofenceAlertResponse,
    GeofenceZoneResponse,
    IoTReadingResponse,
    TelemetryIngestResponse,
    TelemetryReadingRequest,
)
from app.telemetry_monitor.service import TelemetryMonitor

router = APIRouter()


@router.post("/readings", response_model=TelemetryIngestResponse, status_code=201)
async def ingest_reading(
    request: TelemetryReadingRequest,
    db: AsyncSession = Depends(get_db),
    monitor: TelemetryMonitor = Depends(get_telemetry_monitor),
) -> TelemetryIngestResponse:
    outcome = await monitor.ingest(db, request)
    return TelemetryIngestResponse(
        reading=IoTReadingResponse.model_validate(outcome.reading),
        geofence_events=outcome.geofence_events,
        geofence_alerts=[GeofenceAlertResponse.model_validate(a) for a in outcome.geofence_alerts],
        exception_ids=[e.id for e in outcome.exceptions],
        message=outcome.message,
    )


@router.get("/zones", response_model=list[GeofenceZoneResponse])
async def list_zones() -> list[GeofenceZoneResponse]:
    return [GeofenceZoneResponse.model_validate(z) for z in GEOFENCE_ZONES]


@router.get("/geofence-alerts", response_model=list[GeofenceAlertResponse])
async def list_geofence_alerts(
    tracking_number: str | None = None,
    resolved: bool | None = None,
    db: AsyncSession = Depends(get_db),
    monitor: TelemetryMonitor = Depends(get_telemetry_monitor),
) -> list[GeofenceAlertResponse]:
    alerts = await monitor.list_geofence_alerts(db, tracking_number, resolved)
    return [GeofenceAlertResponse.model_validate(a) for a in alerts]


@router.post("/geofence-alerts/{alert_id}/resolve", response_model=GeofenceAlertResponse)
async def resolve_geofence_alert(
    alert_id: str,
    db: AsyncSession = Depends(get_db),
    monitor: TelemetryMonitor = Depends(get_telemetry_monitor),
) -> GeofenceAlertResponse:
    alert = await monitor.resolve_geofence_alert(db, alert_id)
    return GeofenceAlertResponse.model_validate(alert)
