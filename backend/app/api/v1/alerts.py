"""Exception alert and notification endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_alert_service, get_db
from app.models.alerts import AlertStatus
from app.notifications.service import AlertService
from app.schemas.alerts import (
    ExceptionAlertResponse,
    ExceptionResolveRequest,
    NotificationResponse,
    StatusChangeRequest,
)

router = APIRouter()


@router.get("/exceptions", response_model=list[ExceptionAlertResponse])
async def list_exceptions(
    tracking_number: str | None = None,
    status: AlertStatus | None = None,
    db: AsyncSession = Depends(get_db),
    alerts: AlertService = Depends(get_alert_service),
) -> list[ExceptionAlertResponse]:
    items = await alerts.list_exceptions(db, tracking_number, status)
    return [ExceptionAlertResponse.model_validate(a) for a in items]


@router.post("/exceptions/{alert_id}/resolve", response_model=ExceptionAlertResponse)
async def resolve_exception(
    alert_id: str,
    request: ExceptionResolveRequest,
    db: AsyncSession = Depends(get_db),
    alerts: AlertService = Depends(get_alert_service),
) -> ExceptionAlertResponse:
    alert = await alerts.resolve_exception(db, alert_id, request.note, request.resolved_by)
    return ExceptionAlertResponse.model_validate(alert)


@router.post("/status-changes", response_model=list[NotificationResponse], status_code=201)
async def notify_status_change(
    request: StatusChangeRequest,
    db: AsyncSession = Depends(get_db),
    alerts: AlertService = Depends(get_alert_service),
) -> list[NotificationResponse]:
    """Fan a shipment status change out to every customer channel."""
    created = await alerts.notify_status_change(db, request.tracking_number, request.status)
    return [NotificationResponse.model_validate(n) for n in created]


@router.get("/notifications", response_model=list[NotificationResponse])
async def list_notifications(
    tracking_number: str,
    db: AsyncSession = Depends(get_db),
    alerts: AlertService = Depends(get_alert_service),
) -> list[NotificationResponse]:
    items = await alerts.list_notifications(db, tracking_number)
    return [NotificationResponse.model_validate(n) for n in items]


@router.post("/notifications/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    db: AsyncSession = Depends(get_db),
    alerts: AlertService = Depends(get_alert_service),
) -> NotificationResponse:
    notification = await alerts.mark_notification_read(db, notification_id)
    return NotificationResponse.model_validate(notification)
