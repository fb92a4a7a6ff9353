"""End-to-end tests through the HTTP surface."""

import pytest


class TestRatesApi:
    @pytest.mark.asyncio
    async def test_compare(self, client):
        response = await client.post("/api/v1/rates/compare", json={
            "origin": "Dubai, UAE",
            "destination": "Mogadishu, Somalia",
            "weight_kg": 500,
            "volume_cbm": 3,
        })
        assert response.status_code == 200
        data = response.json()
        assert [o["mode"] for o in data["options"]] == ["Sea", "Road", "Air"]
        assert data["options"][0]["price_usd"] == 1537.5
        assert data["demand_factor"] == 1.0

    @pytest.mark.asyncio
    async def test_zero_weight_rejected(self, client):
        response = await client.post("/api/v1/rates/compare", json={
            "origin": "Dubai, UAE",
            "destination": "Mogadishu, Somalia",
            "weight_kg": 0,
            "volume_cbm": 3,
        })
        assert response.status_code == 422


class TestComplianceApi:
    @pytest.mark.asyncio
    async def test_run_and_list(self, client):
        response = await client.post("/api/v1/compliance/checks", json={
            "tracking_number": "IMK-1001",
            "hs_code": "847130",
            "origin_country": "UAE",
            "destination_country": "Somalia",
            "cargo_value_usd": 12000,
            "documents": ["Commercial Invoice", "Packing List", "Certificate of Origin"],
        })
        assert response.status_code == 201
        check = response.json()
        assert check["id"] == "CMP-0001"
        assert check["status"] == "Pass"

        listed = await client.get("/api/v1/compliance/checks", params={"tracking_number": "IMK-1001"})
        assert listed.status_code == 200
        assert listed.json()["total"] == 1


class TestRoutesApi:
    @pytest.mark.asyncio
    async def test_optimize_then_latest(self, client):
        created = await client.post("/api/v1/routes/optimize", json={
            "tracking_number": "IMK-1001",
            "strategy": "Speed",
        })
        assert created.status_code == 201
        assert created.json()["recommended_mode"] == "Air"

        latest = await client.get("/api/v1/routes/IMK-1001/latest")
        assert latest.status_code == 200
        assert latest.json()["id"] == created.json()["id"]

    @pytest.mark.asyncio
    async def test_unknown_shipment_is_404(self, client):
        response = await client.post("/api/v1/routes/optimize", json={"tracking_number": "IMK-0000"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Shipment not found."}

    @pytest.mark.asyncio
    async def test_invalid_strategy(self, client):
        response = await client.post("/api/v1/routes/optimize", json={
            "tracking_number": "IMK-1001",
            "strategy": "Cheapest",
        })
        assert response.status_code == 422


class TestEtaApi:
    @pytest.mark.asyncio
    async def test_refresh_and_get(self, client):
        refreshed = await client.post("/api/v1/eta/IMK-1002/refresh")
        assert refreshed.status_code == 200
        assert refreshed.json()["predicted_eta"] == "2026-10-23"

        fetched = await client.get("/api/v1/eta/IMK-1002")
        assert fetched.json()["confidence_pct"] == 66

    @pytest.mark.asyncio
    async def test_missing_baseline_is_422(self, client):
        response = await client.post("/api/v1/eta/IMK-1003/refresh")
        assert response.status_code == 422
        assert response.json()["detail"] == "Shipment has no baseline ETA."

    @pytest.mark.asyncio
    async def test_refresh_missing(self, client):
        response = await client.post("/api/v1/eta/refresh-missing")
        assert response.json()["total"] == 2


class TestTelemetryApi:
    @pytest.mark.asyncio
    async def test_breach_reports_exception(self, client):
        response = await client.post("/api/v1/telemetry/readings", json={
            "tracking_number": "IMK-1002",
            "lat": -1.0,
            "lng": 38.0,
            "temperature_c": 34.5,
        })
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Telemetry saved."
        assert data["exception_ids"] == ["EXP-0001"]

        alerts = await client.get("/api/v1/alerts/exceptions", params={"tracking_number": "IMK-1002"})
        assert alerts.json()[0]["note"] == "Temperature at 34.5C exceeded threshold."

    @pytest.mark.asyncio
    async def test_out_of_range_latitude(self, client):
        response = await client.post("/api/v1/telemetry/readings", json={
            "tracking_number": "IMK-1002",
            "lat": 91,
            "lng": 38.0,
            "temperature_c": 10,
        })
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_zones(self, client):
        response = await client.get("/api/v1/telemetry/zones")
        assert [z["id"] for z in response.json()] == ["GF-001", "GF-002", "GF-003"]


class TestBillingApi:
    @pytest.mark.asyncio
    async def test_invoice_and_payment(self, client):
        invoice = await client.post("/api/v1/billing/invoices", json={"tracking_number": "IMK-1001"})
        assert invoice.status_code == 201
        invoice_id = invoice.json()["id"]
        assert invoice_id == "INV-2026-001"

        payment = await client.post("/api/v1/billing/payments", json={
            "invoice_id": invoice_id,
            "method": "SWIFT/IBAN",
            "amount": 1537.5,
        })
        assert payment.status_code == 201
        body = payment.json()
        assert body["invoice"]["status"] == "Paid"
        assert body["message"] == f"Payment {body['payment']['reference']} recorded."

        payments = await client.get(f"/api/v1/billing/invoices/{invoice_id}/payments")
        assert len(payments.json()) == 1

    @pytest.mark.asyncio
    async def test_unsupported_currency_is_422(self, client):
        response = await client.post("/api/v1/billing/invoices", json={
            "tracking_number": "IMK-1001",
            "currency": "GBP",
        })
        assert response.status_code == 422
        assert response.json() == {"detail": "Unsupported currency: GBP."}

    @pytest.mark.asyncio
    async def test_unknown_invoice_is_404(self, client):
        response = await client.get("/api/v1/billing/invoices/INV-2026-404")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_fx_refresh_keeps_usd(self, client):
        response = await client.post("/api/v1/billing/fx-rates/refresh")
        rates = {r["currency"]: r["rate_to_usd"] for r in response.json()}
        assert rates["USD"] == 1.0
        assert len(rates) == 5


class TestAlertsApi:
    @pytest.mark.asyncio
    async def test_status_change_and_read(self, client):
        created = await client.post("/api/v1/alerts/status-changes", json={
            "tracking_number": "IMK-1002",
            "status": "Customs",
        })
        assert created.status_code == 201
        assert len(created.json()) == 3

        exceptions = await client.get("/api/v1/alerts/exceptions", params={"status": "Open"})
        assert [e["type"] for e in exceptions.json()] == ["Customs Hold"]

        notification_id = created.json()[0]["id"]
        read = await client.post(f"/api/v1/alerts/notifications/{notification_id}/read")
        assert read.json()["read"] is True

    @pytest.mark.asyncio
    async def test_resolve_exception(self, client):
        await client.post("/api/v1/alerts/status-changes", json={
            "tracking_number": "IMK-1002",
            "status": "Customs",
        })
        resolved = await client.post("/api/v1/alerts/exceptions/EXP-0001/resolve", json={
            "note": "Duty paid, released",
            "resolved_by": "broker.nbo",
        })
        assert resolved.status_code == 200
        assert resolved.json()["status"] == "Resolved"
        assert resolved.json()["note"] == "Duty paid, released"


class TestCarriersAndDocumentsApi:
    @pytest.mark.asyncio
    async def test_list_carriers(self, client):
        response = await client.get("/api/v1/carriers")
        assert len(response.json()) == 4

    @pytest.mark.asyncio
    async def test_sync_unknown_carrier(self, client):
        response = await client.post("/api/v1/carriers/CR-999/sync")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_generate_documents(self, client):
        response = await client.post("/api/v1/documents/generate", json={
            "tracking_number": "IMK-1001",
            "mode": "Sea",
        })
        assert response.status_code == 201
        assert [d["type"] for d in response.json()][-1] == "Bill of Lading"

        listed = await client.get("/api/v1/documents/IMK-1001")
        assert len(listed.json()) == 4


class TestAuditApi:
    @pytest.mark.asyncio
    async def test_stats_count_engine_events(self, client):
        await client.post("/api/v1/routes/optimize", json={"tracking_number": "IMK-1001"})
        stats = await client.get("/api/v1/audit/stats")
        assert stats.json()["events_by_type"]["ROUTE_OPTIMIZED"] == 1

        events = await client.get("/api/v1/audit/events", params={"event_type": "ROUTE_OPTIMIZED"})
        assert events.json()["total"] == 1


class TestRequestLogging:
    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client):
        response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client):
        response = await client.get("/api/v1/health")
        assert len(response.headers["X-Request-ID"]) == 8
