import random

from fastapi import Depends

from app.billing_engine.service import BillingService
from app.carrier_sync.service import CarrierSyncService
from app.compliance_engine.service import TradeComplianceService
from app.config import settings
from app.database import get_db
from app.documents.service import ShipmentDocumentService
from app.eta_engine.service import PredictiveEtaService
from app.notifications.service import AlertService
from app.rate_engine.service import RateComparisonService
from app.route_optimizer.service import RouteOptimizer
from app.services.clock import SystemClock
from app.telemetry_monitor.service import TelemetryMonitor

# Re-export get_db for use in Depends()
get_db = get_db


def get_clock() -> SystemClock:
    return SystemClock()


def get_rng() -> random.Random:
    return random.Random()


def get_rate_service(clock=Depends(get_clock)) -> RateComparisonService:
    return RateComparisonService(clock)


def get_alert_service(clock=Depends(get_clock)) -> AlertService:
    return AlertService(clock)


def get_compliance_service(
    clock=Depends(get_clock), alerts: AlertService = Depends(get_alert_service)
) -> TradeComplianceService:
    return TradeComplianceService(settings, clock, alerts)


def get_route_optimizer(clock=Depends(get_clock)) -> RouteOptimizer:
    return RouteOptimizer(clock)


def get_eta_service(clock=Depends(get_clock)) -> PredictiveEtaService:
    return PredictiveEtaService(clock)


def get_telemetry_monitor(
    clock=Depends(get_clock), alerts: AlertService = Depends(get_alert_service)
) -> TelemetryMonitor:
    return TelemetryMonitor(settings, clock, alerts)


def get_billing_service(
    clock=Depends(get_clock), rng: random.Random = Depends(get_rng)
) -> BillingService:
    return BillingService(settings, clock, rng)


def get_document_service(clock=Depends(get_clock)) -> ShipmentDocumentService:
    return ShipmentDocumentService(clock)


def get_carrier_service(
    clock=Depends(get_clock), rng: random.Random = Depends(get_rng)
) -> CarrierSyncService:
    return CarrierSyncService(clock, rng)
