"""ORM model for trade compliance checks: append-only history."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum as SAEnum, Float, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values


class ComplianceStatus(str, enum.Enum):
    PASS = "Pass"
    WARNING = "Warning"
    FAIL = "Fail"


class Incoterm(str, enum.Enum):
    EXW = "EXW"
    FOB = "FOB"
    CIF = "CIF"
    DDP = "DDP"


class ComplianceCheck(Base):
    __tablename__ = "compliance_checks"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str | None] = mapped_column(String(40), nullable=True, index=True)
    request_id: Mapped[str | None] = mapped_column(String(40), nullable=True)
    hs_code: Mapped[str] = mapped_column(String(20), nullable=False)
    duties_usd: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[ComplianceStatus] = mapped_column(
        SAEnum(ComplianceStatus, name="compliance_status", values_callable=enum_values),
        nullable=False,
    )
    issues: Mapped[list] = mapped_column(JSON, default=list)
    suggestions: Mapped[list] = mapped_column(JSON, default=list)
    generated_docs: Mapped[list] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
