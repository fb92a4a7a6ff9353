"""Pydantic schemas for audit events."""

from datetime import datetime

from pydantic import BaseModel, Field


class AuditEventResponse(BaseModel):
    id: str
    event_type: str
    entity_type: str | None = None
    entity_ref: str | None = None
    action: str | None = None
    actor: str | None = None
    new_state: dict | None = None
    rationale: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class AuditEventListResponse(BaseModel):
    events: list[AuditEventResponse]
    total: int
    page: int
    per_page: int


class AuditStatsResponse(BaseModel):
    total_events: int = 0
    events_by_type: dict[str, int] = Field(default_factory=dict)
