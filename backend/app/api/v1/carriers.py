"""Carrier connection endpoints: list, simulated sync, milestone events."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.carrier_sync.service import CarrierSyncService
from app.dependencies import get_carrier_service, get_db
from app.schemas.carriers import (
    CarrierConnectionResponse,
    CarrierEventRequest,
    CarrierEventResponse,
)

router = APIRouter()


@router.get("", response_model=list[CarrierConnectionResponse])
async def list_carriers(
    db: AsyncSession = Depends(get_db),
    service: CarrierSyncService = Depends(get_carrier_service),
) -> list[CarrierConnectionResponse]:
    return [CarrierConnectionResponse.model_validate(c) for c in await service.list_carriers(db)]


@router.post("/{carrier_id}/sync", response_model=CarrierConnectionResponse)
async def refresh_carrier_sync(
    carrier_id: str,
    db: AsyncSession = Depends(get_db),
    service: CarrierSyncService = Depends(get_carrier_service),
) -> CarrierConnectionResponse:
    carrier = await service.refresh_sync(db, carrier_id)
    return CarrierConnectionResponse.model_validate(carrier)


@router.post("/events", response_model=CarrierEventResponse, status_code=201)
async def add_carrier_event(
    request: CarrierEventRequest,
    db: AsyncSession = Depends(get_db),
    service: CarrierSyncService = Depends(get_carrier_service),
) -> CarrierEventResponse:
    event = await service.add_event(
        db,
        tracking_number=request.tracking_number,
        carrier_id=request.carrier_id,
        event=request.event,
        location=request.location,
        eta=request.eta,
    )
    return CarrierEventResponse.model_validate(event)


@router.get("/events/{tracking_number}", response_model=list[CarrierEventResponse])
async def list_carrier_events(
    tracking_number: str,
    db: AsyncSession = Depends(get_db),
    service: CarrierSyncService = Depends(get_carrier_service),
) -> list[CarrierEventResponse]:
    return [CarrierEventResponse.model_validate(e) for e in await service.list_events(db, tracking_number)]
