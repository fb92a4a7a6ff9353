"""Pydantic schemas for trade compliance checks."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.compliance import ComplianceStatus, Incoterm


class ComplianceCheckRequest(BaseModel):
    tracking_number: str | None = None
    request_id: str | None = None
    hs_code: str
    origin_country: str
    destination_country: str
    cargo_value_usd: float = Field(ge=0)
    incoterm: Incoterm = Incoterm.FOB
    hazardous: bool = False
    documents: list[str] = Field(default_factory=list)


class ComplianceCheckResponse(BaseModel):
    id: str
    tracking_number: str | None = None
    request_id: str | None = None
    hs_code: str
    duties_usd: float
    status: ComplianceStatus
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    generated_docs: list[str] = Field(default_factory=list)
    created_at: datetime

    model_config = {"from_attributes": True}


class ComplianceCheckListResponse(BaseModel):
    checks: list[ComplianceCheckResponse]
    total: int
