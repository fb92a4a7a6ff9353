"""Trade compliance endpoints: run a check, list the check history."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.compliance_engine.service import TradeComplianceService
from app.dependencies import get_compliance_service, get_db
from app.schemas.compliance import (
    ComplianceCheckListResponse,
    ComplianceCheckRequest,
    ComplianceCheckResponse,
)

router = APIRouter()


@router.post("/checks", response_model=ComplianceCheckResponse, status_code=201)
async def run_compliance_check(
    request: ComplianceCheckRequest,
    db: AsyncSession = Depends(get_db),
    service: TradeComplianceService = Depends(get_compliance_service),
) -> ComplianceCheckResponse:
    """Screen a shipment. A Fail is a normal result, not an error."""
    check = await service.run_check(db, request)
    return ComplianceCheckResponse.model_validate(check)


@router.get("/checks", response_model=ComplianceCheckListResponse)
async def list_compliance_checks(
    tracking_number: str | None = None,
    limit: int = 50,
    db: AsyncSession = Depends(get_db),
    service: TradeComplianceService = Depends(get_compliance_service),
) -> ComplianceCheckListResponse:
    checks = await service.list_checks(db, tracking_number, limit)
    return ComplianceCheckListResponse(
        checks=[ComplianceCheckResponse.model_validate(c) for c in checks],
        total=len(checks),
    )
