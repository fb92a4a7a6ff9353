"""FactStore: read-only access to shipments, cargo jobs and customs entries."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.facts import CargoJob, CustomsEntry, Shipment


def normalize_tracking_number(value: str | None) -> str:
    return (value or "").strip().upper()


class FactStore:
    """The engine reads facts through this interface and never writes them."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_shipment(self, tracking_number: str) -> Shipment | None:
        return await self.db.get(Shipment, tracking_number)

    async def list_shipments(self) -> list[Shipment]:
        result = await self.db.execute(select(Shipment).order_by(Shipment.tracking_number))
        return list(result.scalars().all())

    async def get_cargo_job(self, tracking_number: str) -> CargoJob | None:
        result = await self.db.execute(
            select(CargoJob)
            .where(CargoJob.tracking_number == tracking_number)
            .order_by(CargoJob.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_customs_duty_usd(self, tracking_number: str) -> float:
        """Recorded customs duty for the shipment, 0 when no entry exists."""
        result = await self.db.execute(
            select(CustomsEntry.duty_amount_usd)
            .where(CustomsEntry.tracking_number == tracking_number)
            .order_by(CustomsEntry.id)
            .limit(1)
        )
        duty = result.scalar_one_or_none()
        return float(duty) if duty is not None else 0.0
