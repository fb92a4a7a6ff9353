"""Initial schema: fact store, engine decision records, reference tables, audit log

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Enum types shared by more than one table are created once up front
shipment_mode = postgresql.ENUM("Air", "Sea", "Road", name="shipment_mode", create_type=False)
risk_level = postgresql.ENUM("Low", "Medium", "High", name="risk_level", create_type=False)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def upgrade() -> None:
    bind = op.get_bind()
    shipment_mode.create(bind, checkfirst=True)
    risk_level.create(bind, checkfirst=True)

    # ── Fact store (read-only to the engine) ──

    op.create_table(
        "shipments",
        sa.Column("tracking_number", sa.String(40), primary_key=True),
        sa.Column("customer_email", sa.String(320), nullable=False),
        sa.Column("origin", sa.String(200), nullable=False),
        sa.Column("destination", sa.String(200), nullable=False),
        sa.Column("mode", shipment_mode, nullable=True),
        sa.Column("service_type", sa.Enum("Express", "Standard", name="service_type"), nullable=True),
        sa.Column("risk_level", risk_level, nullable=True),
        sa.Column(
            "status",
            sa.Enum("Pending", "In Transit", "Customs", "Delivered", name="shipment_status"),
            nullable=False,
            server_default="Pending",
        ),
        sa.Column("eta", sa.Date, nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "cargo_jobs",
        sa.Column("id", sa.String(40), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("mode", shipment_mode, nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "Booked", "In Transit", "Customs", "Out for Delivery", "Delivered", "Delayed", "On Hold",
                name="job_status",
            ),
            nullable=False,
            server_default="Booked",
        ),
        sa.Column("weight_kg", sa.Float, nullable=True),
        sa.Column("volume_cbm", sa.Float, nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "customs_entries",
        sa.Column("id", sa.String(40), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("declaration_no", sa.String(100), nullable=True),
        sa.Column("duty_amount_usd", sa.Float, nullable=False, server_default="0"),
        _created_at(),
        _updated_at(),
    )

    # ── Engine decision records ──

    op.create_table(
        "compliance_checks",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=True, index=True),
        sa.Column("request_id", sa.String(40), nullable=True),
        sa.Column("hs_code", sa.String(20), nullable=False),
        sa.Column("duties_usd", sa.Float, nullable=False),
        sa.Column("status", sa.Enum("Pass", "Warning", "Fail", name="compliance_status"), nullable=False),
        sa.Column("issues", sa.JSON, nullable=True),
        sa.Column("suggestions", sa.JSON, nullable=True),
        sa.Column("generated_docs", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "route_plans",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("origin", sa.String(200), nullable=False),
        sa.Column("destination", sa.String(200), nullable=False),
        sa.Column(
            "strategy",
            sa.Enum("Cost", "Speed", "Balanced", "Low Carbon", name="route_strategy"),
            nullable=False,
        ),
        sa.Column("recommended_mode", shipment_mode, nullable=False),
        sa.Column("recommended_carrier", sa.String(200), nullable=False),
        sa.Column("estimated_transit_days", sa.Integer, nullable=False),
        sa.Column("estimated_cost_usd", sa.Float, nullable=False),
        sa.Column("distance_km", sa.Float, nullable=False),
        sa.Column("risk_score", sa.Integer, nullable=False),
        sa.Column("carbon_kg", sa.Float, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "predictive_etas",
        sa.Column("tracking_number", sa.String(40), primary_key=True),
        sa.Column("predicted_eta", sa.Date, nullable=False),
        sa.Column("confidence_pct", sa.Integer, nullable=False),
        sa.Column("risk_level", risk_level, nullable=False),
        sa.Column("factors", sa.JSON, nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "iot_readings",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("lat", sa.Float, nullable=False),
        sa.Column("lng", sa.Float, nullable=False),
        sa.Column("temperature_c", sa.Float, nullable=False),
        sa.Column("humidity_pct", sa.Float, nullable=False),
        sa.Column("shock_g", sa.Float, nullable=False),
        sa.Column("seal_open", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "geofence_alerts",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("zone_name", sa.String(200), nullable=False),
        sa.Column("event", sa.Enum("Entered", "Exited", name="geofence_event"), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("resolved", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "exception_alerts",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column(
            "type",
            sa.Enum(
                "Delay", "Customs Hold", "Temperature Breach", "Geofence Exit",
                "Compliance Failure", "Payment Pending",
                name="exception_type",
            ),
            nullable=False,
        ),
        sa.Column("severity", sa.Enum("Low", "Medium", "High", name="alert_severity"), nullable=False),
        sa.Column(
            "status",
            sa.Enum("Open", "Resolved", name="alert_status"),
            nullable=False,
            server_default="Open",
        ),
        sa.Column("note", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "shipment_notifications",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("customer_email", sa.String(320), nullable=False),
        sa.Column("channel", sa.Enum("Email", "SMS", "Push", name="notification_channel"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column(
            "severity",
            sa.Enum("Info", "Warning", "Critical", name="notification_severity"),
            nullable=False,
        ),
        sa.Column("read", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "shipment_documents",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column(
            "type",
            sa.Enum(
                "Commercial Invoice", "Air Waybill", "Bill of Lading", "Packing List",
                "Insurance Certificate", "Certificate of Origin", "Proof of Delivery",
                name="document_type",
            ),
            nullable=False,
        ),
        sa.Column("file_name", sa.String(512), nullable=False),
        sa.Column("uploaded_by", sa.String(200), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("verified", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    # ── Billing ──

    op.create_table(
        "fx_rates",
        sa.Column("currency", sa.String(3), primary_key=True),
        sa.Column("rate_to_usd", sa.Float, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "billing_invoices",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("customer_email", sa.String(320), nullable=False),
        sa.Column(
            "billing_plan",
            sa.Enum("Per Shipment", "Monthly Contract", name="billing_plan"),
            nullable=False,
        ),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("freight_amount", sa.Float, nullable=False),
        sa.Column("duty_amount", sa.Float, nullable=False),
        sa.Column("insurance_amount", sa.Float, nullable=False),
        sa.Column("total_amount", sa.Float, nullable=False),
        sa.Column(
            "status",
            sa.Enum("Draft", "Issued", "Partially Paid", "Paid", name="invoice_status"),
            nullable=False,
            server_default="Issued",
        ),
        sa.Column(
            "trigger",
            sa.Enum("Manual", "PoD", "Port Arrival", "Customs Cleared", name="payment_trigger"),
            nullable=False,
        ),
        sa.Column("issued_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("due_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "payment_transactions",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("invoice_id", sa.String(20), nullable=False, index=True),
        sa.Column("tracking_number", sa.String(40), nullable=False),
        sa.Column(
            "method",
            sa.Enum(
                "VISA", "MasterCard", "Amex", "SWIFT/IBAN", "Apple Pay", "Google Pay", "PayPal", "BNPL",
                name="payment_method",
            ),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.Enum("Freight", "Duty", "Insurance", "Split", name="payment_type"),
            nullable=False,
        ),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("amount_usd", sa.Float, nullable=False),
        sa.Column(
            "status",
            sa.Enum("Pending", "Authorized", "Settled", "Failed", name="payment_status"),
            nullable=False,
        ),
        sa.Column("three_d_secure", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("tokenized", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("two_factor_verified", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("reference", sa.String(40), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # ── Carriers ──

    op.create_table(
        "carrier_connections",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("mode", sa.Enum("Air", "Sea", "Road", "Multi", name="carrier_mode"), nullable=False),
        sa.Column(
            "api_status",
            sa.Enum("Connected", "Degraded", "Offline", name="carrier_api_status"),
            nullable=False,
        ),
        sa.Column("last_sync_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("success_rate_pct", sa.Float, nullable=False),
        sa.Column("coverage", sa.JSON, nullable=True),
    )

    op.create_table(
        "carrier_events",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("tracking_number", sa.String(40), nullable=False, index=True),
        sa.Column("carrier_id", sa.String(20), nullable=False),
        sa.Column("event", sa.String(500), nullable=False),
        sa.Column("location", sa.String(200), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("eta", sa.Date, nullable=True),
    )

    # ── Audit ──

    op.create_table(
        "audit_events",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("event_type", sa.String(100), nullable=False, index=True),
        sa.Column("entity_type", sa.String(100), nullable=True),
        sa.Column("entity_ref", sa.String(100), nullable=True, index=True),
        sa.Column("action", sa.String(100), nullable=True),
        sa.Column("actor", sa.String(200), nullable=False, server_default="engine"),
        sa.Column("new_state", sa.JSON, nullable=True),
        sa.Column("rationale", sa.Text, nullable=True),
        _created_at(),
    )


def downgrade() -> None:
    for table in (
        "audit_events",
        "carrier_events",
        "carrier_connections",
        "payment_transactions",
        "billing_invoices",
        "fx_rates",
        "shipment_documents",
        "shipment_notifications",
        "exception_alerts",
        "geofence_alerts",
        "iot_readings",
        "predictive_etas",
        "route_plans",
        "compliance_checks",
        "customs_entries",
        "cargo_jobs",
        "shipments",
    ):
        op.drop_table(table)

    for enum_name in (
        "carrier_api_status",
        "carrier_mode",
        "payment_status",
        "payment_type",
        "payment_method",
        "payment_trigger",
        "invoice_status",
        "billing_plan",
        "document_type",
        "notification_severity",
        "notification_channel",
        "alert_status",
        "alert_severity",
        "exception_type",
        "geofence_event",
        "route_strategy",
        "compliance_status",
        "job_status",
        "shipment_status",
        "service_type",
        "risk_level",
        "shipment_mode",
    ):
        op.execute(f"DROP TYPE IF EXISTS {enum_name}")
