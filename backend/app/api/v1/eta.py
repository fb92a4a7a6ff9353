"""Predictive ETA endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db, get_eta_service
from app.eta_engine.service import PredictiveEtaService
from app.schemas.routing import PredictiveEtaListResponse, PredictiveEtaResponse

router = APIRouter()


@router.post("/refresh-missing", response_model=PredictiveEtaListResponse)
async def refresh_missing_etas(
    db: AsyncSession = Depends(get_db),
    service: PredictiveEtaService = Depends(get_eta_service),
) -> PredictiveEtaListResponse:
    """Compute a prediction for every shipment that has none yet."""
    predictions = await service.refresh_missing(db)
    return PredictiveEtaListResponse(
        predictions=[PredictiveEtaResponse.model_validate(p) for p in predictions],
        total=len(predictions),
    )


@router.post("/{tracking_number}/refresh", response_model=PredictiveEtaResponse)
async def refresh_eta(
    tracking_number: str,
    db: AsyncSession = Depends(get_db),
    service: PredictiveEtaService = Depends(get_eta_service),
) -> PredictiveEtaResponse:
    prediction = await service.refresh(db, tracking_number)
    return PredictiveEtaResponse.model_validate(prediction)


@router.get("/{tracking_number}", response_model=PredictiveEtaResponse)
async def get_eta(
    tracking_number: str,
    db: AsyncSession = Depends(get_db),
    service: PredictiveEtaService = Depends(get_eta_service),
) -> PredictiveEtaResponse:
    prediction = await service.get(db, tracking_number)
    return PredictiveEtaResponse.model_validate(prediction)
