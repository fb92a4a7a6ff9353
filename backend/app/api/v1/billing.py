"""Billing endpoints: invoices, payments, FX rates."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.billing_engine.service import BillingService
from app.dependencies import get_billing_service, get_db
from app.schemas.billing import (
    FxRateResponse,
    InvoiceCreateRequest,
    InvoiceResponse,
    PaymentCreateRequest,
    PaymentRecordResponse,
    PaymentResponse,
)

router = APIRouter()


@router.post("/invoices", response_model=InvoiceResponse, status_code=201)
async def create_invoice(
    request: InvoiceCreateRequest,
    db: AsyncSession = Depends(get_db),
    billing: BillingService = Depends(get_billing_service),
) -> InvoiceResponse:
    invoice = await billing.create_invoice(db, request)
    return InvoiceResponse.model_validate(invoice)


@router.get("/invoices/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: str,
    db: AsyncSession = Depends(get_db),
    billing: BillingService = Depends(get_billing_service),
) -> InvoiceResponse:
    invoice = await billing.get_invoice(db, invoice_id)
    return InvoiceResponse.model_validate(invoice)


@router.get("/invoices/{invoice_id}/payments", response_model=list[PaymentResponse])
async def list_invoice_payments(
    invoice_id: str,
    db: AsyncSession = Depends(get_db),
    billing: BillingService = Depends(get_billing_service),
) -> list[PaymentResponse]:
    payments = await billing.list_payments(db, invoice_id)
    return [PaymentResponse.model_validate(p) for p in payments]


@router.post("/payments", response_model=PaymentRecordResponse, status_code=201)
async def record_payment(
    request: PaymentCreateRequest,
    db: AsyncSession = Depends(get_db),
    billing: BillingService = Depends(get_billing_service),
) -> PaymentRecordResponse:
    """Record a payment and recompute the invoice status."""
    payment, invoice = await billing.record_payment(db, request)
    return PaymentRecordResponse(
        payment=PaymentResponse.model_validate(payment),
        invoice=InvoiceResponse.model_validate(invoice),
        message=f"Payment {payment.reference} recorded.",
    )


@router.get("/fx-rates", response_model=list[FxRateResponse])
async def list_fx_rates(
    db: AsyncSession = Depends(get_db),
    billing: BillingService = Depends(get_billing_service),
) -> list[FxRateResponse]:
    return [FxRateResponse.model_validate(r) for r in await billing.list_fx_rates(db)]


@router.post("/fx-rates/refresh", response_model=list[FxRateResponse])
async def refresh_fx_rates(
    db: AsyncSession = Depends(get_db),
    billing: BillingService = Depends(get_billing_service),
) -> list[FxRateResponse]:
    return [FxRateResponse.model_validate(r) for r in await billing.refresh_fx_rates(db)]
