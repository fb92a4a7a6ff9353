"""BillingService: invoice creation, payment reconciliation and FX refresh.

createInvoice flow:
1. Look up the shipment, its cargo job and any recorded customs duty
2. Price the shipment's mode through the rate engine (fallback $1500)
3. Add insurance, total in USD, convert each amount into the invoice currency
4. Persist the invoice as Issued, due after the configured number of days

record_payment flow (invoice collection and row locked until commit):
1. Convert the payment to USD and append the transaction
2. Sum every Settled payment on the invoice, recompute status forward-only
"""

import logging
import random
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.billing_engine.settlement import (
    FALLBACK_FREIGHT_USD,
    currency_to_usd,
    insurance_usd,
    jitter_rate,
    next_invoice_status,
    payment_reference,
    usd_to_currency,
)
from app.config import Settings
from app.exceptions import NotFoundError, ValidationFailure
from app.models.billing import (
    BillingInvoice,
    FxRate,
    InvoiceStatus,
    PaymentStatus,
    PaymentTransaction,
)
from app.rate_engine.service import RateComparisonService
from app.repositories.billing import FxRateRepository, InvoiceRepository, PaymentRepository
from app.repositories.facts import FactStore, normalize_tracking_number
from app.schemas.billing import InvoiceCreateRequest, PaymentCreateRequest
from app.services.clock import SystemClock

logger = logging.getLogger("imk.billing_engine")

DEFAULT_PRICING_MODE = "Sea"
DEFAULT_WEIGHT_KG = 100.0
DEFAULT_VOLUME_CBM = 1.0


class BillingService:
    def __init__(self, settings: Settings, clock=None, rng: random.Random | None = None):
        self.settings = settings
        self.clock = clock or SystemClock()
        self.rng = rng or random.Random()
        self.rates = RateComparisonService(self.clock)

    async def _rate_for(self, db: AsyncSession, currency: str) -> float:
        fx = await FxRateRepository(db).get(currency)
        if fx is None:
            raise ValidationFailure(f"Unsupported currency: {currency}.")
        return fx.rate_to_usd

    async def create_invoice(self, db: AsyncSession, request: InvoiceCreateRequest) -> BillingInvoice:
        tracking_number = normalize_tracking_number(request.tracking_number)
        facts = FactStore(db)
        shipment = await facts.get_shipment(tracking_number)
        if shipment is None:
            raise NotFoundError("Shipment not found.")

        currency = request.currency.upper()
        rate = await self._rate_for(db, currency)

        job = await facts.get_cargo_job(tracking_number)
        duty_usd = await facts.get_customs_duty_usd(tracking_number)
        mode = shipment.mode.value if shipment.mode else DEFAULT_PRICING_MODE
        options = self.rates.quote(
            shipment.origin,
            shipment.destination,
            job.weight_kg if job and job.weight_kg else DEFAULT_WEIGHT_KG,
            job.volume_cbm if job and job.volume_cbm else DEFAULT_VOLUME_CBM,
            shipment.service_type.value if shipment.service_type else "Standard",
        )
        priced = next((o for o in options if o.mode == mode), None)
        freight_usd = priced.price_usd if priced else FALLBACK_FREIGHT_USD
        insurance = insurance_usd(freight_usd, request.include_insurance)
        total_usd = round(freight_usd + duty_usd + insurance, 2)

        issued_at = self.clock.now()
        repo = InvoiceRepository(db)
        await repo.lock()
        invoice = BillingInvoice(
            id=await repo.next_id_for_year(issued_at.year),
            tracking_number=tracking_number,
            customer_email=shipment.customer_email,
            billing_plan=request.billing_plan,
            currency=currency,
            freight_amount=usd_to_currency(freight_usd, rate),
            duty_amount=usd_to_currency(duty_usd, rate),
            insurance_amount=usd_to_currency(insurance, rate),
            total_amount=usd_to_currency(total_usd, rate),
            status=InvoiceStatus.ISSUED,
            trigger=request.trigger,
            issued_at=issued_at,
            due_at=issued_at + timedelta(days=self.settings.invoice_due_days),
        )
        await repo.save(invoice)

        logger.info(
            "Invoice %s issued for %s: %.2f %s (USD %.2f)",
            invoice.id, tracking_number, invoice.total_amount, currency, total_usd,
        )
        await AuditService.record(
            db,
            event_type="INVOICE_ISSUED",
            entity_type="billing_invoice",
            entity_ref=invoice.id,
            new_state={
                "tracking_number": tracking_number,
                "currency": currency,
                "total_amount": invoice.total_amount,
                "total_usd": total_usd,
                "status": invoice.status.value,
            },
            occurred_at=issued_at,
        )
        return invoice

    async def get_invoice(self, db: AsyncSession, invoice_id: str) -> BillingInvoice:
        invoice = await InvoiceRepository(db).get(invoice_id)
        if invoice is None:
            raise NotFoundError("Invoice not found.")
        return invoice

    async def list_payments(self, db: AsyncSession, invoice_id: str) -> list[PaymentTransaction]:
        await self.get_invoice(db, invoice_id)
        return await PaymentRepository(db).list_for_invoice(invoice_id)

    async def record_payment(
        self, db: AsyncSession, request: PaymentCreateRequest
    ) -> tuple[PaymentTransaction, BillingInvoice]:
        if request.amount <= 0:
            raise ValidationFailure("Payment amount must be greater than zero.")

        invoices = InvoiceRepository(db)
        payments = PaymentRepository(db)
        currency = request.currency.upper()

        await invoices.lock()
        invoice = await invoices.get_for_update(request.invoice_id)
        if invoice is None:
            raise NotFoundError("Invoice not found.")
        payment_rate = await self._rate_for(db, currency)
        invoice_rate = await self._rate_for(db, invoice.currency)

        payment = await payments.create(
            invoice_id=invoice.id,
            tracking_number=invoice.tracking_number,
            method=request.method,
            type=request.type,
            amount=request.amount,
            currency=currency,
            amount_usd=currency_to_usd(request.amount, payment_rate),
            status=request.status,
            three_d_secure=request.three_d_secure,
            tokenized=request.tokenized,
            two_factor_verified=request.two_factor_verified,
            reference=payment_reference(self.rng),
            created_at=self.clock.now(),
        )

        settled_usd = await payments.settled_usd_total(invoice.id)
        total_usd = currency_to_usd(invoice.total_amount, invoice_rate)
        previous = invoice.status
        invoice.status = InvoiceStatus(
            next_invoice_status(previous.value, settled_usd, total_usd)
        )
        await invoices.save(invoice)

        logger.info(
            "Payment %s (%s) on %s: %.2f %s, settled USD %.2f / %.2f -> %s",
            payment.id, payment.reference, invoice.id, request.amount, currency,
            settled_usd, total_usd, invoice.status.value,
        )
        await AuditService.record(
            db,
            event_type="PAYMENT_RECORDED",
            entity_type="payment_transaction",
            entity_ref=payment.id,
            new_state={
                "invoice_id": invoice.id,
                "amount_usd": payment.amount_usd,
                "status": payment.status.value,
                "reference": payment.reference,
            },
            occurred_at=payment.created_at,
        )
        if invoice.status != previous:
            await AuditService.record(
                db,
                event_type="INVOICE_STATUS_CHANGED",
                entity_type="billing_invoice",
                entity_ref=invoice.id,
                new_state={"status": invoice.status.value, "previous": previous.value},
                rationale=f"Settled USD {settled_usd:.2f} against total USD {total_usd:.2f}",
                occurred_at=payment.created_at,
            )
        return payment, invoice

    async def list_fx_rates(self, db: AsyncSession) -> list[FxRate]:
        return await FxRateRepository(db).all()

    async def refresh_fx_rates(self, db: AsyncSession) -> list[FxRate]:
        """Jitter every non-USD rate by up to the configured fraction; USD stays 1."""
        repo = FxRateRepository(db)
        now = self.clock.now()
        await repo.lock()
        rates = await repo.all()
        for fx in rates:
            if fx.currency == "USD":
                fx.rate_to_usd = 1.0
            else:
                fx.rate_to_usd = jitter_rate(
                    fx.rate_to_usd, self.rng.random(), self.settings.fx_jitter_fraction
                )
            fx.updated_at = now
        await db.flush()
        logger.info("Refreshed %d FX rate(s)", len(rates))
        await AuditService.record(
            db,
            event_type="FX_RATES_REFRESHED",
            entity_type="fx_rate",
            new_state={fx.currency: fx.rate_to_usd for fx in rates},
            occurred_at=now,
        )
        return rates
