"""ShipmentDocumentService: document uploads and the auto-generated standard set."""

import logging
import re

from sqlalchemy.ext.asyncio import AsyncSession

from app.audit.service import AuditService
from app.exceptions import ValidationFailure
from app.models.documents import DocumentType, ShipmentDocument
from app.models.facts import ShipmentMode
from app.repositories.documents import DocumentRepository
from app.repositories.facts import normalize_tracking_number
from app.services.clock import SystemClock

logger = logging.getLogger("imk.documents")

AUTO_DOC_UPLOADER = "Auto-Doc Engine"


def standard_document_types(mode: ShipmentMode | str | None) -> list[DocumentType]:
    """Document set every shipment needs: Air Waybill for air, Bill of Lading otherwise."""
    transport_doc = (
        DocumentType.AIR_WAYBILL if mode == ShipmentMode.AIR else DocumentType.BILL_OF_LADING
    )
    return [
        DocumentType.COMMERCIAL_INVOICE,
        DocumentType.PACKING_LIST,
        DocumentType.CERTIFICATE_OF_ORIGIN,
        transport_doc,
    ]


def generated_file_name(doc_type: DocumentType, tracking_number: str) -> str:
    stem = re.sub(r"\s+", "_", doc_type.value).upper()
    return f"{stem}-{tracking_number}.pdf"


class ShipmentDocumentService:
    def __init__(self, clock=None):
        self.clock = clock or SystemClock()

    async def upload(
        self,
        db: AsyncSession,
        *,
        tracking_number: str,
        doc_type: DocumentType,
        file_name: str,
        uploaded_by: str,
        verified: bool = False,
    ) -> ShipmentDocument:
        tracking_number = normalize_tracking_number(tracking_number)
        if not tracking_number or not file_name.strip() or not uploaded_by.strip():
            raise ValidationFailure("Tracking number, file name, and uploader are required.")

        document = await DocumentRepository(db).create(
            tracking_number=tracking_number,
            type=doc_type,
            file_name=file_name.strip(),
            uploaded_by=uploaded_by.strip(),
            uploaded_at=self.clock.now(),
            verified=verified,
        )
        await AuditService.record(
            db,
            event_type="DOCUMENT_UPLOADED",
            entity_type="shipment_document",
            entity_ref=document.id,
            actor=document.uploaded_by,
            new_state={"tracking_number": tracking_number, "type": doc_type.value},
            occurred_at=document.uploaded_at,
        )
        logger.info("%s uploaded for %s as %s", doc_type.value, tracking_number, document.id)
        return document

    async def generate_standard(
        self, db: AsyncSession, tracking_number: str, mode: ShipmentMode | str | None
    ) -> list[ShipmentDocument]:
        tracking_number = normalize_tracking_number(tracking_number)
        if not tracking_number:
            raise ValidationFailure("Tracking number is required.")

        generated = []
        for doc_type in standard_document_types(mode):
            generated.append(await self.upload(
                db,
                tracking_number=tracking_number,
                doc_type=doc_type,
                file_name=generated_file_name(doc_type, tracking_number),
                uploaded_by=AUTO_DOC_UPLOADER,
                # Certificates of origin need a chamber stamp before they count as verified
                verified=doc_type != DocumentType.CERTIFICATE_OF_ORIGIN,
            ))
        return generated

    async def list_for(self, db: AsyncSession, tracking_number: str) -> list[ShipmentDocument]:
        return await DocumentRepository(db).list_for(normalize_tracking_number(tracking_number))
