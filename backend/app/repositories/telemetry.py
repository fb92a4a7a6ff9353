from sqlalchemy import select

from app.models.telemetry import GeofenceAlert, IoTReading
from app.repositories.base import Repository, id_order


class IoTReadingRepository(Repository[IoTReading]):
    model = IoTReading
    id_prefix = "IOT"

    async def latest_for(self, tracking_number: str) -> IoTReading | None:
        result = await self.db.execute(
            select(IoTReading)
            .where(IoTReading.tracking_number == tracking_number)
            .order_by(IoTReading.timestamp.desc(), *id_order(IoTReading.id, descending=True))
            .limit(1)
        )
        return result.scalar_one_or_none()


class GeofenceAlertRepository(Repository[GeofenceAlert]):
    model = GeofenceAlert
    id_prefix = "GFA"

    async def list_for(
        self, tracking_number: str | None = None, resolved: bool | None = None
    ) -> list[GeofenceAlert]:
        query = select(GeofenceAlert)
        if tracking_number:
            query = query.where(GeofenceAlert.tracking_number == tracking_number)
        if resolved is not None:
            query = query.where(GeofenceAlert.resolved == resolved)
        query = query.order_by(
            GeofenceAlert.timestamp.desc(), *id_order(GeofenceAlert.id, descending=True)
        )
        return list((await self.db.execute(query)).scalars().all())
