import pytest


def create_payment(client, headers, **overrides):
    body = {"leaseId": "lease-1", "tenantId": "tenant-1", "propertyId": "prop-1",
            "dueDate": "2026-02-05", "amount": 950, "kind": "RENT"}
    body.update(overrides)
    resp = client.post("/api/payments/", json=body, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


class TestPayments:

    def test_defaults(self, client, holder_headers):
        payment = create_payment(client, holder_headers)

        assert payment["status"] == "PLANNED"
        assert payment["currency"] == "EUR"
        assert "paidDate" not in payment

    def test_mark_paid(self, client, holder_headers):
        payment = create_payment(client, holder_headers)

        resp = client.patch(f"/api/payments/{payment['id']}",
                            json={"status": "PAID", "paidDate": "2026-02-03"},
                            headers=holder_headers)

        data = resp.json()["data"]
        assert data["status"] == "PAID"
        assert data["paidDate"] == "2026-02-03"
        assert data["amount"] == 950.0

    def test_list_filters(self, client, holder_headers):
        create_payment(client, holder_headers, kind="RENT")
        create_payment(client, holder_headers, kind="BUILDING_FEE", leaseId="lease-2")

        fees = client.get("/api/payments/", params={"kind": "BUILDING_FEE"},
                          headers=holder_headers).json()["data"]
        lease_1 = client.get("/api/payments/", params={"leaseId": "lease-1"},
                             headers=holder_headers).json()["data"]

        assert fees["total"] == 1
        assert lease_1["payments"][0]["kind"] == "RENT"

    def test_negative_amount_is_rejected(self, client, holder_headers):
        resp = client.post("/api/payments/", json={
            "leaseId": "l", "tenantId": "t", "propertyId": "p",
            "dueDate": "2026-02-05", "amount": -1, "kind": "RENT"}, headers=holder_headers)
        assert resp.status_code == 422

    @pytest.mark.parametrize("field", ["dueDate", "amount", "kind", "status", "currency"])
    def test_required_field_cannot_be_cleared(self, client, holder_headers, field):
        payment = create_payment(client, holder_headers)

        resp = client.patch(f"/api/payments/{payment['id']}", json={field: None},
                            headers=holder_headers)

        assert resp.status_code == 422
        assert f"{field} cannot be null" in resp.json()["message"]

    def test_amount_beyond_column_precision(self, client, holder_headers):
        resp = client.post("/api/payments/", json={
            "leaseId": "l", "tenantId": "t", "propertyId": "p",
            "dueDate": "2026-02-05", "amount": 1e30, "kind": "RENT"}, headers=holder_headers)
        assert resp.status_code == 422

    def test_unknown_payment(self, client, holder_headers):
        resp = client.get("/api/payments/missing", headers=holder_headers)

        assert resp.status_code == 404
        assert resp.json()["message"] == "Payment missing not found"


class TestExpenses:

    def test_cost_month_derived_from_cost_date(self, client, holder_headers):
        resp = client.post("/api/expenses/", json={
            "propertyId": "prop-1", "type": "cleaning", "amount": 60,
            "costDate": "2026-04-17"}, headers=holder_headers)

        data = resp.json()["data"]
        assert data["costMonth"] == "2026-04"
        assert data["currency"] == "EUR"

    def test_moving_cost_date_moves_month(self, client, holder_headers):
        expense = client.post("/api/expenses/", json={
            "propertyId": "prop-1", "type": "cleaning", "amount": 60,
            "costDate": "2026-04-17"}, headers=holder_headers).json()["data"]

        resp = client.patch(f"/api/expenses/{expense['id']}",
                            json={"costDate": "2026-05-02"}, headers=holder_headers)

        assert resp.json()["data"]["costMonth"] == "2026-05"

    @pytest.mark.parametrize("field", ["costDate", "amount", "propertyId", "type"])
    def test_required_field_cannot_be_cleared(self, client, holder_headers, field):
        expense = client.post("/api/expenses/", json={
            "propertyId": "prop-1", "type": "cleaning", "amount": 60,
            "costDate": "2026-04-17"}, headers=holder_headers).json()["data"]

        resp = client.patch(f"/api/expenses/{expense['id']}", json={field: None},
                            headers=holder_headers)

        assert resp.status_code == 422

    def test_bad_cost_month(self, client, holder_headers):
        resp = client.post("/api/expenses/", json={
            "propertyId": "prop-1", "type": "cleaning", "amount": 60,
            "costDate": "2026-04-17", "costMonth": "2026-13"}, headers=holder_headers)
        assert resp.status_code == 422

    def test_list_by_property(self, client, holder_headers):
        for prop in ("prop-1", "prop-1", "prop-2"):
            client.post("/api/expenses/", json={
                "propertyId": prop, "type": "repair", "amount": 10,
                "costDate": "2026-01-01"}, headers=holder_headers)

        data = client.get("/api/expenses/", params={"propertyId": "prop-1"},
                          headers=holder_headers).json()["data"]
        assert data["total"] == 2
