"""ORM models for carrier connections and carrier milestone events."""

import enum
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum as SAEnum, Float, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values


class CarrierMode(str, enum.Enum):
    AIR = "Air"
    SEA = "Sea"
    ROAD = "Road"
    MULTI = "Multi"


class CarrierApiStatus(str, enum.Enum):
    CONNECTED = "Connected"
    DEGRADED = "Degraded"
    OFFLINE = "Offline"


class CarrierConnection(Base):
    __tablename__ = "carrier_connections"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    mode: Mapped[CarrierMode] = mapped_column(
        SAEnum(CarrierMode, name="carrier_mode", values_callable=enum_values), nullable=False
    )
    api_status: Mapped[CarrierApiStatus] = mapped_column(
        SAEnum(CarrierApiStatus, name="carrier_api_status", values_callable=enum_values),
        nullable=False,
    )
    last_sync_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    success_rate_pct: Mapped[float] = mapped_column(Float, nullable=False)
    coverage: Mapped[list] = mapped_column(JSON, default=list)


class CarrierEvent(Base):
    __tablename__ = "carrier_events"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    carrier_id: Mapped[str] = mapped_column(String(20), nullable=False)
    event: Mapped[str] = mapped_column(String(500), nullable=False)
    location: Mapped[str] = mapped_column(String(200), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    eta: Mapped[date | None] = mapped_column(Date, nullable=True)
