"""Tests for ShipmentDocumentService."""

import pytest

from app.documents.service import (
    ShipmentDocumentService,
    generated_file_name,
    standard_document_types,
)
from app.exceptions import ValidationFailure
from app.models.documents import DocumentType
from app.models.facts import ShipmentMode


class TestStandardSet:
    def test_air_gets_waybill(self):
        assert standard_document_types(ShipmentMode.AIR)[-1] == DocumentType.AIR_WAYBILL

    def test_other_modes_get_bill_of_lading(self):
        for mode in (ShipmentMode.SEA, ShipmentMode.ROAD, None):
            assert standard_document_types(mode)[-1] == DocumentType.BILL_OF_LADING

    def test_file_name(self):
        assert generated_file_name(DocumentType.COMMERCIAL_INVOICE, "IMK-1001") == (
            "COMMERCIAL_INVOICE-IMK-1001.pdf"
        )
        assert generated_file_name(DocumentType.CERTIFICATE_OF_ORIGIN, "IMK-1001") == (
            "CERTIFICATE_OF_ORIGIN-IMK-1001.pdf"
        )


class TestShipmentDocumentService:
    @pytest.mark.asyncio
    async def test_generate_standard(self, seeded, clock):
        service = ShipmentDocumentService(clock)
        generated = await service.generate_standard(seeded, "imk-1002", ShipmentMode.AIR)

        assert [d.type for d in generated] == [
            DocumentType.COMMERCIAL_INVOICE,
            DocumentType.PACKING_LIST,
            DocumentType.CERTIFICATE_OF_ORIGIN,
            DocumentType.AIR_WAYBILL,
        ]
        assert generated[0].file_name == "COMMERCIAL_INVOICE-IMK-1002.pdf"
        assert all(d.uploaded_by == "Auto-Doc Engine" for d in generated)
        verified = {d.type: d.verified for d in generated}
        assert verified[DocumentType.CERTIFICATE_OF_ORIGIN] is False
        assert verified[DocumentType.PACKING_LIST] is True

    @pytest.mark.asyncio
    async def test_upload_and_list(self, seeded, clock):
        service = ShipmentDocumentService(clock)
        uploaded = await service.upload(
            seeded,
            tracking_number="IMK-1001",
            doc_type=DocumentType.INSURANCE_CERTIFICATE,
            file_name=" policy-7781.pdf ",
            uploaded_by="ops.dubai",
        )
        assert uploaded.id == "DOC-0001"
        assert uploaded.file_name == "policy-7781.pdf"
        assert uploaded.verified is False
        assert [d.id for d in await service.list_for(seeded, "imk-1001")] == ["DOC-0001"]

    @pytest.mark.asyncio
    async def test_blank_file_name_rejected(self, seeded, clock):
        with pytest.raises(ValidationFailure):
            await ShipmentDocumentService(clock).upload(
                seeded,
                tracking_number="IMK-1001",
                doc_type=DocumentType.PACKING_LIST,
                file_name="  ",
                uploaded_by="ops.dubai",
            )
