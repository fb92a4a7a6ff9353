"""AuditService: immutable append-only log of engine decisions.

Static methods so every engine service can call AuditService.record() directly
without DI wiring.
"""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.audit import AuditEvent


class AuditService:
    """Static audit event recorder and query interface."""

    @staticmethod
    async def record(
        db: AsyncSession,
        *,
        event_type: str,
        entity_type: str | None = None,
        entity_ref: str | None = None,
        action: str | None = None,
        actor: str = "engine",
        new_state: dict | None = None,
        rationale: str | None = None,
        occurred_at: datetime | None = None,
    ) -> AuditEvent:
        """Append an audit event for a record the engine created or changed."""
        event = AuditEvent(
            event_type=event_type,
            entity_type=entity_type,
            entity_ref=entity_ref,
            action=action or event_type.lower(),
            actor=actor,
            new_state=new_state,
            rationale=rationale,
        )
        if occurred_at is not None:
            event.created_at = occurred_at
        db.add(event)
        await db.flush()
        return event

    @staticmethod
    async def get_events(
        db: AsyncSession,
        *,
        entity_type: str | None = None,
        entity_ref: str | None = None,
        event_type: str | None = None,
        page: int = 1,
        per_page: int = 50,
    ) -> tuple[list[AuditEvent], int]:
        """Query audit events with filtering and pagination."""
        query = select(AuditEvent)
        count_query = select(func.count(AuditEvent.id))

        if entity_type:
            query = query.where(AuditEvent.entity_type == entity_type)
            count_query = count_query.where(AuditEvent.entity_type == entity_type)
        if entity_ref:
            query = query.where(AuditEvent.entity_ref == entity_ref)
            count_query = count_query.where(AuditEvent.entity_ref == entity_ref)
        if event_type:
            query = query.where(AuditEvent.event_type == event_type)
            count_query = count_query.where(AuditEvent.event_type == event_type)

        total = (await db.execute(count_query)).scalar_one()

        offset = (page - 1) * per_page
        query = query.order_by(AuditEvent.created_at.desc()).offset(offset).limit(per_page)
        events = list((await db.execute(query)).scalars().all())
        return events, total

    @staticmethod
    async def get_stats(db: AsyncSession) -> dict:
        """Event counts by type."""
        total = (await db.execute(select(func.count(AuditEvent.id)))).scalar_one()
        rows = (await db.execute(
            select(AuditEvent.event_type, func.count(AuditEvent.id))
            .group_by(AuditEvent.event_type)
        )).all()
        return {
            "total_events": total,
            "events_by_type": {row[0] or "unknown": row[1] for row in rows},
        }
