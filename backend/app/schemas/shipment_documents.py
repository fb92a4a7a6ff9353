"""Pydantic schemas for shipment documents."""

from datetime import datetime

from pydantic import BaseModel

from app.models.documents import DocumentType
from app.models.facts import ShipmentMode


class DocumentUploadRequest(BaseModel):
    tracking_number: str
    type: DocumentType
    file_name: str
    uploaded_by: str


class GenerateDocumentsRequest(BaseModel):
    tracking_number: str
    mode: ShipmentMode


class ShipmentDocumentResponse(BaseModel):
    id: str
    tracking_number: str
    type: DocumentType
    file_name: str
    uploaded_by: str
    uploaded_at: datetime
    verified: bool

    model_config = {"from_attributes": True}
