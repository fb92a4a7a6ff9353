"""ORM models for IoT telemetry readings and geofence alerts."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values


class GeofenceEvent(str, enum.Enum):
    ENTERED = "Entered"
    EXITED = "Exited"


class IoTReading(Base):
    __tablename__ = "iot_readings"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)
    temperature_c: Mapped[float] = mapped_column(Float, nullable=False)
    humidity_pct: Mapped[float] = mapped_column(Float, nullable=False)
    shock_g: Mapped[float] = mapped_column(Float, nullable=False)
    seal_open: Mapped[bool] = mapped_column(Boolean, default=False)


class GeofenceAlert(Base):
    __tablename__ = "geofence_alerts"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    zone_name: Mapped[str] = mapped_column(String(200), nullable=False)
    event: Mapped[GeofenceEvent] = mapped_column(
        SAEnum(GeofenceEvent, name="geofence_event", values_callable=enum_values), nullable=False
    )
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    resolved: Mapped[bool] = mapped_column(Boolean, default=False)
