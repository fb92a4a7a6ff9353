"""Rate comparison endpoint."""

from fastapi import APIRouter, Depends

from app.dependencies import get_rate_service
from app.rate_engine.service import RateComparisonService
from app.schemas.rates import RateCompareRequest, RateCompareResponse, RateOptionResponse

router = APIRouter()


@router.post("/compare", response_model=RateCompareResponse)
async def compare_rates(
    request: RateCompareRequest,
    rates: RateComparisonService = Depends(get_rate_service),
) -> RateCompareResponse:
    """Price Air, Sea and Road for a lane, cheapest first."""
    options = rates.quote(
        request.origin,
        request.destination,
        request.weight_kg,
        request.volume_cbm,
        request.service_type.value,
    )
    return RateCompareResponse(
        options=[RateOptionResponse.model_validate(o) for o in options],
        demand_factor=rates.current_demand_factor(),
    )
