from sqlalchemy import select

from app.models.routing import PredictiveEta, RoutePlan
from app.repositories.base import Repository, id_order


class RoutePlanRepository(Repository[RoutePlan]):
    model = RoutePlan
    id_prefix = "RTE"

    async def latest_for(self, tracking_number: str) -> RoutePlan | None:
        """The effective plan for a shipment is the most recently created one."""
        result = await self.db.execute(
            select(RoutePlan)
            .where(RoutePlan.tracking_number == tracking_number)
            .order_by(RoutePlan.created_at.desc(), *id_order(RoutePlan.id, descending=True))
            .limit(1)
        )
        return result.scalar_one_or_none()


class PredictiveEtaRepository(Repository[PredictiveEta]):
    model = PredictiveEta

    async def upsert(self, prediction: PredictiveEta) -> PredictiveEta:
        """Replace the live prediction for the tracking number, or insert one."""
        await self.lock()
        existing = await self.get(prediction.tracking_number)
        if existing is None:
            self.db.add(prediction)
            await self.db.flush()
            return prediction

        existing.predicted_eta = prediction.predicted_eta
        existing.confidence_pct = prediction.confidence_pct
        existing.risk_level = prediction.risk_level
        existing.factors = list(prediction.factors)
        existing.updated_at = prediction.updated_at
        await self.db.flush()
        return existing

    async def tracking_numbers(self) -> set[str]:
        result = await self.db.execute(select(PredictiveEta.tracking_number))
        return set(result.scalars().all())
