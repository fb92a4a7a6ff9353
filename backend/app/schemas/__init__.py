from app.schemas.billing import InvoiceResponse, PaymentResponse
from app.schemas.compliance import ComplianceCheckResponse
from app.schemas.health import HealthResponse
from app.schemas.rates import RateCompareResponse
from app.schemas.routing import PredictiveEtaResponse, RoutePlanResponse
from app.schemas.telemetry import TelemetryIngestResponse

__all__ = [
    "ComplianceCheckResponse",
    "HealthResponse",
    "InvoiceResponse",
    "PaymentResponse",
    "PredictiveEtaResponse",
    "RateCompareResponse",
    "RoutePlanResponse",
    "TelemetryIngestResponse",
]
