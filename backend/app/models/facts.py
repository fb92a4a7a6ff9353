"""ORM models for the shipment fact store: shipments, cargo jobs, customs entries.

These tables are owned by the operations dashboard. The engine only reads them.
"""

import enum
from datetime import date

from sqlalchemy import Date, Enum as SAEnum, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, enum_values


class ShipmentMode(str, enum.Enum):
    AIR = "Air"
    SEA = "Sea"
    ROAD = "Road"


class ServiceType(str, enum.Enum):
    EXPRESS = "Express"
    STANDARD = "Standard"


class RiskLevel(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ShipmentStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_TRANSIT = "In Transit"
    CUSTOMS = "Customs"
    DELIVERED = "Delivered"


class JobStatus(str, enum.Enum):
    BOOKED = "Booked"
    IN_TRANSIT = "In Transit"
    CUSTOMS = "Customs"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    DELAYED = "Delayed"
    ON_HOLD = "On Hold"


class Shipment(Base, TimestampMixin):
    __tablename__ = "shipments"

    tracking_number: Mapped[str] = mapped_column(String(40), primary_key=True)
    customer_email: Mapped[str] = mapped_column(String(320), nullable=False)
    origin: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[str] = mapped_column(String(200), nullable=False)
    mode: Mapped[ShipmentMode | None] = mapped_column(
        SAEnum(ShipmentMode, name="shipment_mode", values_callable=enum_values), nullable=True
    )
    service_type: Mapped[ServiceType | None] = mapped_column(
        SAEnum(ServiceType, name="service_type", values_callable=enum_values), nullable=True
    )
    risk_level: Mapped[RiskLevel | None] = mapped_column(
        SAEnum(RiskLevel, name="risk_level", values_callable=enum_values), nullable=True
    )
    status: Mapped[ShipmentStatus] = mapped_column(
        SAEnum(ShipmentStatus, name="shipment_status", values_callable=enum_values),
        default=ShipmentStatus.PENDING,
    )
    eta: Mapped[date | None] = mapped_column(Date, nullable=True)


class CargoJob(Base, TimestampMixin):
    __tablename__ = "cargo_jobs"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    mode: Mapped[ShipmentMode] = mapped_column(
        SAEnum(ShipmentMode, name="shipment_mode", values_callable=enum_values), nullable=False
    )
    status: Mapped[JobStatus] = mapped_column(
        SAEnum(JobStatus, name="job_status", values_callable=enum_values),
        default=JobStatus.BOOKED,
    )
    weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    volume_cbm: Mapped[float | None] = mapped_column(Float, nullable=True)


class CustomsEntry(Base, TimestampMixin):
    __tablename__ = "customs_entries"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    declaration_no: Mapped[str | None] = mapped_column(String(100), nullable=True)
    duty_amount_usd: Mapped[float] = mapped_column(Float, default=0.0)
