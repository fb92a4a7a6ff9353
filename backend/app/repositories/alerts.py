from sqlalchemy import select

from app.models.alerts import AlertStatus, ExceptionAlert, ShipmentNotification
from app.repositories.base import Repository, id_order


class ExceptionAlertRepository(Repository[ExceptionAlert]):
    model = ExceptionAlert
    id_prefix = "EXP"

    async def list_for(
        self, tracking_number: str | None = None, status: AlertStatus | None = None
    ) -> list[ExceptionAlert]:
        query = select(ExceptionAlert)
        if tracking_number:
            query = query.where(ExceptionAlert.tracking_number == tracking_number)
        if status is not None:
            query = query.where(ExceptionAlert.status == status)
        query = query.order_by(
            ExceptionAlert.created_at.desc(), *id_order(ExceptionAlert.id, descending=True)
        )
        return list((await self.db.execute(query)).scalars().all())


class NotificationRepository(Repository[ShipmentNotification]):
    model = ShipmentNotification
    id_prefix = "NTF"

    async def list_for(self, tracking_number: str) -> list[ShipmentNotification]:
        result = await self.db.execute(
            select(ShipmentNotification)
            .where(ShipmentNotification.tracking_number == tracking_number)
            .order_by(*id_order(ShipmentNotification.id))
        )
        return list(result.scalars().all())
