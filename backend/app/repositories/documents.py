from sqlalchemy import select

from app.models.documents import ShipmentDocument
from app.repositories.base import Repository, id_order


class DocumentRepository(Repository[ShipmentDocument]):
    model = ShipmentDocument
    id_prefix = "DOC"

    async def list_for(self, tracking_number: str) -> list[ShipmentDocument]:
        result = await self.db.execute(
            select(ShipmentDocument)
            .where(ShipmentDocument.tracking_number == tracking_number)
            .order_by(*id_order(ShipmentDocument.id))
        )
        return list(result.scalars().all())
