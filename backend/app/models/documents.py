"""ORM model for shipment documents (uploaded or auto-generated)."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values


class DocumentType(str, enum.Enum):
    COMMERCIAL_INVOICE = "Commercial Invoice"
    AIR_WAYBILL = "Air Waybill"
    BILL_OF_LADING = "Bill of Lading"
    PACKING_LIST = "Packing List"
    INSURANCE_CERTIFICATE = "Insurance Certificate"
    CERTIFICATE_OF_ORIGIN = "Certificate of Origin"
    PROOF_OF_DELIVERY = "Proof of Delivery"


class ShipmentDocument(Base):
    __tablename__ = "shipment_documents"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    type: Mapped[DocumentType] = mapped_column(
        SAEnum(DocumentType, name="document_type", values_callable=enum_values), nullable=False
    )
    file_name: Mapped[str] = mapped_column(String(512), nullable=False)
    uploaded_by: Mapped[str] = mapped_column(String(200), nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False)
