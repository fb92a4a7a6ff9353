"""Pydantic schemas for invoices, payments and FX rates."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.billing import (
    BillingPlan,
    InvoiceStatus,
    PaymentMethod,
    PaymentStatus,
    PaymentTrigger,
    PaymentType,
)


class InvoiceCreateRequest(BaseModel):
    tracking_number: str = Field(min_length=1)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    trigger: PaymentTrigger = PaymentTrigger.MANUAL
    include_insurance: bool = False
    billing_plan: BillingPlan = BillingPlan.PER_SHIPMENT


class InvoiceResponse(BaseModel):
    id: str
    tracking_number: str
    customer_email: str
    billing_plan: BillingPlan
    currency: str
    freight_amount: float
    duty_amount: float
    insurance_amount: float
    total_amount: float
    status: InvoiceStatus
    trigger: PaymentTrigger
    issued_at: datetime
    due_at: datetime

    model_config = {"from_attributes": True}


class PaymentCreateRequest(BaseModel):
    invoice_id: str = Field(min_length=1)
    method: PaymentMethod
    type: PaymentType = PaymentType.FREIGHT
    amount: float = Field(gt=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    status: PaymentStatus = PaymentStatus.SETTLED
    three_d_secure: bool = False
    tokenized: bool = False
    two_factor_verified: bool = False


class PaymentResponse(BaseModel):
    id: str
    invoice_id: str
    tracking_number: str
    method: PaymentMethod
    type: PaymentType
    amount: float
    currency: str
    amount_usd: float
    status: PaymentStatus
    three_d_secure: bool
    tokenized: bool
    two_factor_verified: bool
    reference: str
    created_at: datetime

    model_config = {"from_attributes": True}


class PaymentRecordResponse(BaseModel):
    payment: PaymentResponse
    invoice: InvoiceResponse
    message: str


class FxRateResponse(BaseModel):
    currency: str
    rate_to_usd: float
    updated_at: datetime

    model_config = {"from_attributes": True}
