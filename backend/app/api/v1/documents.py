"""Shipment document endpoints: upload, generate standard set, list."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db, get_document_service
from app.documents.service import ShipmentDocumentService
from app.schemas.shipment_documents import (
    DocumentUploadRequest,
    GenerateDocumentsRequest,
    ShipmentDocumentResponse,
)

router = APIRouter()


@router.post("", response_model=ShipmentDocumentResponse, status_code=201)
async def upload_document(
    request: DocumentUploadRequest,
    db: AsyncSession = Depends(get_db),
    service: ShipmentDocumentService = Depends(get_document_service),
) -> ShipmentDocumentResponse:
    document = await service.upload(
        db,
        tracking_number=request.tracking_number,
        doc_type=request.type,
        file_name=request.file_name,
        uploaded_by=request.uploaded_by,
    )
    return ShipmentDocumentResponse.model_validate(document)


@router.post("/generate", response_model=list[ShipmentDocumentResponse], status_code=201)
async def generate_standard_documents(
    request: GenerateDocumentsRequest,
    db: AsyncSession = Depends(get_db),
    service: ShipmentDocumentService = Depends(get_document_service),
) -> list[ShipmentDocumentResponse]:
    documents = await service.generate_standard(db, request.tracking_number, request.mode)
    return [ShipmentDocumentResponse.model_validate(d) for d in documents]


@router.get("/{tracking_number}", response_model=list[ShipmentDocumentResponse])
async def list_documents(
    tracking_number: str,
    db: AsyncSession = Depends(get_db),
    service: ShipmentDocumentService = Depends(get_document_service),
) -> list[ShipmentDocumentResponse]:
    documents = await service.list_for(db, tracking_number)
    return [ShipmentDocumentResponse.model_validate(d) for d in documents]
