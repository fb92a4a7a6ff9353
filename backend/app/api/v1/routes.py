"""Route optimization endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db, get_route_optimizer
from app.route_optimizer.service import RouteOptimizer
from app.schemas.routing import RouteOptimizeRequest, RoutePlanResponse

router = APIRouter()


@router.post("/optimize", response_model=RoutePlanResponse, status_code=201)
async def optimize_route(
    request: RouteOptimizeRequest,
    db: AsyncSession = Depends(get_db),
    optimizer: RouteOptimizer = Depends(get_route_optimizer),
) -> RoutePlanResponse:
    plan = await optimizer.optimize(db, request.tracking_number, request.strategy)
    return RoutePlanResponse.model_validate(plan)


@router.get("/{tracking_number}/latest", response_model=RoutePlanResponse)
async def latest_route_plan(
    tracking_number: str,
    db: AsyncSession = Depends(get_db),
    optimizer: RouteOptimizer = Depends(get_route_optimizer),
) -> RoutePlanResponse:
    """The most recent plan is the effective one."""
    plan = await optimizer.latest_plan(db, tracking_number)
    return RoutePlanResponse.model_validate(plan)
