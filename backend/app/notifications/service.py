"""AlertService: exception alerts and customer status notifications.

Flow for a status change:
1. Resolve the shipment from the fact store
2. Create one notification per channel (Email, SMS, Push)
3. Customs: raise a High "Customs Hold" exception
4. Delivered: file a verified Proof of Delivery document
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.documents.service import ShipmentDocumentService
from app.exceptions import NotFoundError
from app.models.alerts import (
    AlertSeverity,
    AlertStatus,
    ExceptionAlert,
    ExceptionType,
    NotificationChannel,
    NotificationSeverity,
    ShipmentNotification,
)
from app.models.documents import DocumentType
from app.models.facts import ShipmentStatus
from app.notifications.sink import LoggingNotificationSink, NotificationSink
from app.repositories.alerts import ExceptionAlertRepository, NotificationRepository
from app.repositories.facts import FactStore, normalize_tracking_number
from app.services.clock import SystemClock

logger = logging.getLogger("imk.notifications")

STATUS_TITLE = {
    ShipmentStatus.PENDING: "Shipment Booked",
    ShipmentStatus.IN_TRANSIT: "Shipment In Transit",
    ShipmentStatus.CUSTOMS: "Customs Update",
    ShipmentStatus.DELIVERED: "Shipment Delivered",
}

STATUS_LABEL = {
    ShipmentStatus.PENDING: "Booked",
    ShipmentStatus.IN_TRANSIT: "In Transit",
    ShipmentStatus.CUSTOMS: "Customs",
    ShipmentStatus.DELIVERED: "Delivered",
}

STATUS_SEVERITY = {
    ShipmentStatus.PENDING: NotificationSeverity.INFO,
    ShipmentStatus.IN_TRANSIT: NotificationSeverity.INFO,
    ShipmentStatus.CUSTOMS: NotificationSeverity.WARNING,
    ShipmentStatus.DELIVERED: NotificationSeverity.INFO,
}

CHANNELS = (NotificationChannel.EMAIL, NotificationChannel.SMS, NotificationChannel.PUSH)


class AlertService:
    """Raises, resolves and lists exception alerts; emits status notifications."""

    def __init__(self, clock=None, sink: NotificationSink | None = None):
        self.clock = clock or SystemClock()
        self.sink = sink or LoggingNotificationSink()

    async def raise_exception(
        self,
        db: AsyncSession,
        *,
        tracking_number: str,
        exception_type: ExceptionType,
        severity: AlertSeverity,
        note: str | None = None,
    ) -> ExceptionAlert:
        """Persist an Open exception alert and hand it to the notification sink."""
        alert = await ExceptionAlertRepository(db).create(
            tracking_number=tracking_number,
            type=exception_type,
            severity=severity,
            status=AlertStatus.OPEN,
            note=note,
            created_at=self.clock.now(),
        )
        await AuditService.record(
            db,
            event_type="EXCEPTION_RAISED",
            entity_type="exception_alert",
            entity_ref=alert.id,
            new_state={
                "tracking_number": tracking_number,
                "type": exception_type.value,
                "severity": severity.value,
            },
            rationale=note,
            occurred_at=alert.created_at,
        )
        self.sink.publish(alert)
        return alert

    async def resolve_exception(
        self, db: AsyncSession, alert_id: str, note: str | None = None, resolved_by: str = "user"
    ) -> ExceptionAlert:
        repo = ExceptionAlertRepository(db)
        alert = await repo.get(alert_id)
        if alert is None:
            raise NotFoundError(f"Exception alert {alert_id} not found.")

        alert.status = AlertStatus.RESOLVED
        if note and note.strip():
            alert.note = note.strip()
        await repo.save(alert)

        await AuditService.record(
            db,
            event_type="EXCEPTION_RESOLVED",
            entity_type="exception_alert",
            entity_ref=alert.id,
            actor=resolved_by,
            new_state={"status": alert.status.value, "note": alert.note},
            occurred_at=self.clock.now(),
        )
        return alert

    async def list_exceptions(
        self,
        db: AsyncSession,
        tracking_number: str | None = None,
        status: AlertStatus | None = None,
    ) -> list[ExceptionAlert]:
        tracking_number = normalize_tracking_number(tracking_number) or None
        return await ExceptionAlertRepository(db).list_for(tracking_number, status)

    async def notify_status_change(
        self, db: AsyncSession, tracking_number: str, status: ShipmentStatus
    ) -> list[ShipmentNotification]:
        tracking_number = normalize_tracking_number(tracking_number)
        shipment = await FactStore(db).get_shipment(tracking_number)
        if shipment is None:
            raise NotFoundError("Shipment not found.")

        repo = NotificationRepository(db)
        now = self.clock.now()
        created = []
        for channel in CHANNELS:
            created.append(await repo.create(
                tracking_number=tracking_number,
                customer_email=shipment.customer_email,
                channel=channel,
                title=STATUS_TITLE[status],
                message=f"Shipment {tracking_number} changed status to {STATUS_LABEL[status]}.",
                severity=STATUS_SEVERITY[status],
                read=False,
                created_at=now,
            ))
        logger.info("Queued %d notifications for %s (%s)", len(created), tracking_number, status.value)

        if status == ShipmentStatus.CUSTOMS:
            await self.raise_exception(
                db,
                tracking_number=tracking_number,
                exception_type=ExceptionType.CUSTOMS_HOLD,
                severity=AlertSeverity.HIGH,
                note="Manual customs follow-up recommended.",
            )
        elif status == ShipmentStatus.DELIVERED:
            await ShipmentDocumentService(self.clock).upload(
                db,
                tracking_number=tracking_number,
                doc_type=DocumentType.PROOF_OF_DELIVERY,
                file_name=f"POD-{tracking_number}.pdf",
                uploaded_by="Driver App",
                verified=True,
            )

        return created

    async def mark_notification_read(self, db: AsyncSession, notification_id: str) -> ShipmentNotification:
        repo = NotificationRepository(db)
        notification = await repo.get(notification_id)
        if notification is None:
            raise NotFoundError(f"Notification {notification_id} not found.")
        notification.read = True
        return await repo.save(notification)

    async def list_notifications(self, db: AsyncSession, tracking_number: str) -> list[ShipmentNotification]:
        return await NotificationRepository(db).list_for(normalize_tracking_number(tracking_number))
