from fastapi import APIRouter

from app.api.v1 import (
    alerts,
    audit,
    billing,
    carriers,
    compliance,
    documents,
    eta,
    health,
    rates,
    routes,
    telemetry,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/v1", tags=["health"])
api_router.include_router(rates.router, prefix="/v1/rates", tags=["rates"])
api_router.include_router(compliance.router, prefix="/v1/compliance", tags=["compliance"])
api_router.include_router(routes.router, prefix="/v1/routes", tags=["routes"])
api_router.include_router(eta.router, prefix="/v1/eta", tags=["eta"])
api_router.include_router(telemetry.router, prefix="/v1/telemetry", tags=["telemetry"])
api_router.include_router(billing.router, prefix="/v1/billing", tags=["billing"])
api_router.include_router(alerts.router, prefix="/v1/alerts", tags=["alerts"])
api_router.include_router(documents.router, prefix="/v1/documents", tags=["documents"])
api_router.include_router(carriers.router, prefix="/v1/carriers", tags=["carriers"])
api_router.include_router(audit.router, prefix="/v1/audit", tags=["audit"])
