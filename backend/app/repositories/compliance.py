from sqlalchemy import select

from app.models.compliance import ComplianceCheck
from app.repositories.base import Repository, id_order


class ComplianceCheckRepository(Repository[ComplianceCheck]):
    model = ComplianceCheck
    id_prefix = "CMP"

    async def list_recent(
        self, tracking_number: str | None = None, limit: int = 50
    ) -> list[ComplianceCheck]:
        query = select(ComplianceCheck)
        if tracking_number:
            query = query.where(ComplianceCheck.tracking_number == tracking_number)
        query = query.order_by(
            ComplianceCheck.created_at.desc(), *id_order(ComplianceCheck.id, descending=True)
        ).limit(limit)
        return list((await self.db.execute(query)).scalars().all())
