"""Pydantic schemas for exception alerts and shipment notifications."""

from datetime import datetime

from pydantic import BaseModel

from app.models.alerts import (
    AlertSeverity,
    AlertStatus,
    ExceptionType,
    NotificationChannel,
    NotificationSeverity,
)
from app.models.facts import ShipmentStatus


class ExceptionAlertResponse(BaseModel):
    id: str
    tracking_number: str
    type: ExceptionType
    severity: AlertSeverity
    status: AlertStatus
    note: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ExceptionResolveRequest(BaseModel):
    note: str | None = None
    resolved_by: str = "user"


class StatusChangeRequest(BaseModel):
    tracking_number: str
    status: ShipmentStatus


class NotificationResponse(BaseModel):
    id: str
    tracking_number: str
    customer_email: str
    channel: NotificationChannel
    title: str
    message: str
    severity: NotificationSeverity
    read: bool
    created_at: datetime

    model_config = {"from_attributes": True}
