"""ORM models for invoices, payment transactions and FX rates."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values


class InvoiceStatus(str, enum.Enum):
    DRAFT = "Draft"
    ISSUED = "Issued"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"


class BillingPlan(str, enum.Enum):
    PER_SHIPMENT = "Per Shipment"
    MONTHLY_CONTRACT = "Monthly Contract"


class PaymentTrigger(str, enum.Enum):
    MANUAL = "Manual"
    POD = "PoD"
    PORT_ARRIVAL = "Port Arrival"
    CUSTOMS_CLEARED = "Customs Cleared"


class PaymentMethod(str, enum.Enum):
    VISA = "VISA"
    MASTERCARD = "MasterCard"
    AMEX = "Amex"
    SWIFT_IBAN = "SWIFT/IBAN"
    APPLE_PAY = "Apple Pay"
    GOOGLE_PAY = "Google Pay"
    PAYPAL = "PayPal"
    BNPL = "BNPL"


class PaymentType(str, enum.Enum):
    FREIGHT = "Freight"
    DUTY = "Duty"
    INSURANCE = "Insurance"
    SPLIT = "Split"


class PaymentStatus(str, enum.Enum):
    PENDING = "Pending"
    AUTHORIZED = "Authorized"
    SETTLED = "Settled"
    FAILED = "Failed"


class BillingInvoice(Base):
    __tablename__ = "billing_invoices"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    customer_email: Mapped[str] = mapped_column(String(320), nullable=False)
    billing_plan: Mapped[BillingPlan] = mapped_column(
        SAEnum(BillingPlan, name="billing_plan", values_callable=enum_values), nullable=False
    )
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    freight_amount: Mapped[float] = mapped_column(Float, nullable=False)
    duty_amount: Mapped[float] = mapped_column(Float, nullable=False)
    insurance_amount: Mapped[float] = mapped_column(Float, nullable=False)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[InvoiceStatus] = mapped_column(
        SAEnum(InvoiceStatus, name="invoice_status", values_callable=enum_values),
        default=InvoiceStatus.ISSUED,
    )
    trigger: Mapped[PaymentTrigger] = mapped_column(
        SAEnum(PaymentTrigger, name="payment_trigger", values_callable=enum_values), nullable=False
    )
    issued_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    due_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class PaymentTransaction(Base):
    __tablename__ = "payment_transactions"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    invoice_id: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False)
    method: Mapped[PaymentMethod] = mapped_column(
        SAEnum(PaymentMethod, name="payment_method", values_callable=enum_values), nullable=False
    )
    type: Mapped[PaymentType] = mapped_column(
        SAEnum(PaymentType, name="payment_type", values_callable=enum_values), nullable=False
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    amount_usd: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[PaymentStatus] = mapped_column(
        SAEnum(PaymentStatus, name="payment_status", values_callable=enum_values), nullable=False
    )
    three_d_secure: Mapped[bool] = mapped_column(Boolean, default=False)
    tokenized: Mapped[bool] = mapped_column(Boolean, default=False)
    two_factor_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    reference: Mapped[str] = mapped_column(String(40), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class FxRate(Base):
    __tablename__ = "fx_rates"

    currency: Mapped[str] = mapped_column(String(3), primary_key=True)
    # Units of USD per one unit of currency
    rate_to_usd: Mapped[float] = mapped_column(Float, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
