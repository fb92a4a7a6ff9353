from app.models.base import Base, TimestampMixin
from app.models.facts import (
    CargoJob,
    CustomsEntry,
    JobStatus,
    RiskLevel,
    ServiceType,
    Shipment,
    ShipmentMode,
    ShipmentStatus,
)
from app.models.compliance import ComplianceCheck, ComplianceStatus, Incoterm
from app.models.routing import PredictiveEta, RoutePlan, RouteStrategy
from app.models.telemetry import GeofenceAlert, GeofenceEvent, IoTReading
from app.models.alerts import (
    AlertSeverity,
    AlertStatus,
    ExceptionAlert,
    ExceptionType,
    NotificationChannel,
    NotificationSeverity,
    ShipmentNotification,
)
from app.models.billing import (
    BillingInvoice,
    BillingPlan,
    FxRate,
    InvoiceStatus,
    PaymentMethod,
    PaymentStatus,
    PaymentTransaction,
    PaymentTrigger,
    PaymentType,
)
from app.models.documents import DocumentType, ShipmentDocument
from app.models.carriers import CarrierApiStatus, CarrierConnection, CarrierEvent, CarrierMode
from app.models.audit import AuditEvent

__all__ = [
    "Base",
    "TimestampMixin",
    "Shipment",
    "CargoJob",
    "CustomsEntry",
    "ShipmentMode",
    "ServiceType",
    "RiskLevel",
    "ShipmentStatus",
    "JobStatus",
    "ComplianceCheck",
    "ComplianceStatus",
    "Incoterm",
    "RoutePlan",
    "RouteStrategy",
    "PredictiveEta",
    "IoTReading",
    "GeofenceAlert",
    "GeofenceEvent",
    "ExceptionAlert",
    "ExceptionType",
    "AlertSeverity",
    "AlertStatus",
    "ShipmentNotification",
    "NotificationChannel",
    "NotificationSeverity",
    "BillingInvoice",
    "BillingPlan",
    "InvoiceStatus",
    "PaymentTrigger",
    "PaymentTransaction",
    "PaymentMethod",
    "PaymentType",
    "PaymentStatus",
    "FxRate",
    "ShipmentDocument",
    "DocumentType",
    "CarrierConnection",
    "CarrierEvent",
    "CarrierMode",
    "CarrierApiStatus",
    "AuditEvent",
]
