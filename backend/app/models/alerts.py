"""ORM models for exception alerts and customer-facing shipment notifications."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values


class ExceptionType(str, enum.Enum):
    DELAY = "Delay"
    CUSTOMS_HOLD = "Customs Hold"
    TEMPERATURE_BREACH = "Temperature Breach"
    GEOFENCE_EXIT = "Geofence Exit"
    COMPLIANCE_FAILURE = "Compliance Failure"
    PAYMENT_PENDING = "Payment Pending"


class AlertSeverity(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class AlertStatus(str, enum.Enum):
    OPEN = "Open"
    RESOLVED = "Resolved"


class NotificationChannel(str, enum.Enum):
    EMAIL = "Email"
    SMS = "SMS"
    PUSH = "Push"


class NotificationSeverity(str, enum.Enum):
    INFO = "Info"
    WARNING = "Warning"
    CRITICAL = "Critical"


class ExceptionAlert(Base):
    __tablename__ = "exception_alerts"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    type: Mapped[ExceptionType] = mapped_column(
        SAEnum(ExceptionType, name="exception_type", values_callable=enum_values), nullable=False
    )
    severity: Mapped[AlertSeverity] = mapped_column(
        SAEnum(AlertSeverity, name="alert_severity", values_callable=enum_values), nullable=False
    )
    status: Mapped[AlertStatus] = mapped_column(
        SAEnum(AlertStatus, name="alert_status", values_callable=enum_values),
        default=AlertStatus.OPEN,
    )
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class ShipmentNotification(Base):
    __tablename__ = "shipment_notifications"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    customer_email: Mapped[str] = mapped_column(String(320), nullable=False)
    channel: Mapped[NotificationChannel] = mapped_column(
        SAEnum(NotificationChannel, name="notification_channel", values_callable=enum_values),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[NotificationSeverity] = mapped_column(
        SAEnum(NotificationSeverity, name="notification_severity", values_callable=enum_values),
        nullable=False,
    )
    read: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
