"""TradeComplianceService: runs a compliance check and records it.

Flow:
1. Resolve the linked shipment mode (if a tracking reference is given)
2. Evaluate the pure compliance rules
3. Append the check to the history
4. Fail with a tracking reference: raise a High "Compliance Failure" exception
5. Log audit event
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.compliance_engine.rules import ComplianceRules, evaluate_compliance
from app.config import Settings
from app.models.alerts import AlertSeverity, ExceptionType
from app.models.compliance import ComplianceCheck, ComplianceStatus
from app.notifications.service import AlertService
from app.repositories.compliance import ComplianceCheckRepository
from app.repositories.facts import FactStore, normalize_tracking_number
from app.schemas.compliance import ComplianceCheckRequest
from app.services.clock import SystemClock

logger = logging.getLogger("imk.compliance_engine")


class TradeComplianceService:
    def __init__(self, settings: Settings, clock=None, alerts: AlertService | None = None):
        self.settings = settings
        self.rules = ComplianceRules.from_settings(settings)
        self.clock = clock or SystemClock()
        self.alerts = alerts or AlertService(self.clock)

    async def run_check(self, db: AsyncSession, request: ComplianceCheckRequest) -> ComplianceCheck:
        tracking_number = normalize_tracking_number(request.tracking_number) or None

        shipment_mode = None
        if tracking_number:
            shipment = await FactStore(db).get_shipment(tracking_number)
            if shipment is not None and shipment.mode is not None:
                shipment_mode = shipment.mode.value

        outcome = evaluate_compliance(
            hs_code=request.hs_code,
            origin_country=request.origin_country,
            destination_country=request.destination_country,
            cargo_value_usd=request.cargo_value_usd,
            incoterm=request.incoterm.value,
            hazardous=request.hazardous,
            documents=request.documents,
            rules=self.rules,
            shipment_mode=shipment_mode,
        )

        check = await ComplianceCheckRepository(db).create(
            tracking_number=tracking_number,
            request_id=request.request_id,
            hs_code=outcome.hs_code,
            duties_usd=outcome.duties_usd,
            status=ComplianceStatus(outcome.status),
            issues=outcome.issues,
            suggestions=outcome.suggestions,
            generated_docs=outcome.generated_docs,
            created_at=self.clock.now(),
        )
        logger.info(
            "Compliance check %s: %s (%d issues, duties $%.2f)",
            check.id, outcome.status, len(outcome.issues), outcome.duties_usd,
        )

        if check.status == ComplianceStatus.FAIL and tracking_number:
            await self.alerts.raise_exception(
                db,
                tracking_number=tracking_number,
                exception_type=ExceptionType.COMPLIANCE_FAILURE,
                severity=AlertSeverity.HIGH,
                note="Failed automated trade compliance check.",
            )

        await AuditService.record(
            db,
            event_type="COMPLIANCE_CHECK_COMPLETED",
            entity_type="compliance_check",
            entity_ref=check.id,
            new_state={
                "tracking_number": tracking_number,
                "status": outcome.status,
                "duties_usd": outcome.duties_usd,
                "issues": outcome.issues,
            },
            occurred_at=check.created_at,
        )
        return check

    async def list_checks(
        self, db: AsyncSession, tracking_number: str | None = None, limit: int = 50
    ) -> list[ComplianceCheck]:
        tracking_number = normalize_tracking_number(tracking_number) or None
        return await ComplianceCheckRepository(db).list_recent(tracking_number, limit)
