"""Audit log endpoints: query events, view stats."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.dependencies import get_db
from app.schemas.audit import AuditEventListResponse, AuditEventResponse, AuditStatsResponse

router = APIRouter()


@router.get("/events", response_model=AuditEventListResponse)
async def list_events(
    entity_type: str | None = None,
    entity_ref: str | None = None,
    event_type: str | None = None,
    page: int = 1,
    per_page: int = 50,
    db: AsyncSession = Depends(get_db),
) -> AuditEventListResponse:
    """List audit events with optional filtering."""
    events, total = await AuditService.get_events(
        db,
        entity_type=entity_type,
        entity_ref=entity_ref,
        event_type=event_type,
        page=page,
        per_page=per_page,
    )
    return AuditEventListResponse(
        events=[AuditEventResponse.model_validate(e) for e in events],
        total=total,
        page=page,
        per_page=per_page,
    )


@router.get("/stats", response_model=AuditStatsResponse)
async def get_stats(
    db: AsyncSession = Depends(get_db),
) -> AuditStatsResponse:
    stats = await AuditService.get_stats(db)
    return AuditStatsResponse(**stats)
