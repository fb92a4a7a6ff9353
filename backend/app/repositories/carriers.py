from sqlalchemy import select

from app.models.carriers import CarrierConnection, CarrierEvent
from app.repositories.base import Repository, id_order


class CarrierRepository(Repository[CarrierConnection]):
    model = CarrierConnection

    async def all(self) -> list[CarrierConnection]:
        result = await self.db.execute(select(CarrierConnection).order_by(CarrierConnection.id))
        return list(result.scalars().all())


class CarrierEventRepository(Repository[CarrierEvent]):
    model = CarrierEvent
    id_prefix = "CE"

    async def list_for(self, tracking_number: str) -> list[CarrierEvent]:
        result = await self.db.execute(
            select(CarrierEvent)
            .where(CarrierEvent.tracking_number == tracking_number)
            .order_by(CarrierEvent.timestamp.desc(), *id_order(CarrierEvent.id, descending=True))
        )
        return list(result.scalars().all())
