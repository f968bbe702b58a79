import pytest
from datetime import date
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


def invoice_payload(amount: float, status_value: str = "Pending", service: str = "Consulting", day: date = None) -> dict:
    day = day or date.today()
    return {
        "client": "Torres SA",
        "amount": amount,
        "date": day.isoformat(),
        "dueDate": day.isoformat(),
        "status": status_value,
        "service": service,
    }


class TestInvoices:
    async def test_create_invoice_defaults_to_pending(self, client: AsyncClient, auth_headers: dict):
        payload = invoice_payload(250)
        del payload["status"]
        response = await client.post("/api/finance/invoices", json=payload, headers=auth_headers)
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["status"] == "Pending"
        assert response.json()["clientId"] is None

    async def test_unknown_status_is_rejected(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/finance/invoices",
            json=invoice_payload(250, status_value="Lost"),
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_list_is_newest_first(self, client: AsyncClient, auth_headers: dict):
        for day in (date(2024, 1, 10), date(2024, 3, 10), date(2024, 2, 10)):
            await client.post(
                "/api/finance/invoices",
                json=invoice_payload(100, day=day),
                headers=auth_headers
            )

        response = await client.get("/api/finance/invoices", headers=auth_headers)
        assert [i["date"] for i in response.json()] == ["2024-03-10", "2024-02-10", "2024-01-10"]

    async def test_mark_invoice_paid(self, client: AsyncClient, auth_headers: dict):
        created = (await client.post(
            "/api/finance/invoices", json=invoice_payload(400), headers=auth_headers
        )).json()

        response = await client.put(
            f"/api/finance/invoices/{created['id']}",
            json={"status": "Paid"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "Paid"
        assert response.json()["amount"] == 400

    async def test_delete_invoice(self, client: AsyncClient, auth_headers: dict):
        created = (await client.post(
            "/api/finance/invoices", json=invoice_payload(400), headers=auth_headers
        )).json()

        response = await client.delete(f"/api/finance/invoices/{created['id']}", headers=auth_headers)
        assert response.json() == {"message": "Invoice deleted"}
        assert (await client.get("/api/finance/invoices", headers=auth_headers)).json() == []


class TestFinanceStats:
    async def test_empty_store(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/finance/stats", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "totalRevenue": 0,
            "pendingAmount": 0,
            "overdueAmount": 0,
            "revenueByService": [],
            "monthlyRevenue": [],
        }

    async def test_stats_for_current_year(self, client: AsyncClient, auth_headers: dict):
        this_year = date.today().year
        payloads = [
            invoice_payload(1000, "Paid", "Design", date(this_year, 3, 5)),
            invoice_payload(300, "Paid", "Consulting", date(this_year, 3, 20)),
            invoice_payload(200, "Paid", "Consulting", date(this_year, 1, 2)),
            invoice_payload(700, "Paid", "Consulting", date(this_year - 1, 12, 31)),
            invoice_payload(500, "Pending"),
            invoice_payload(150, "Overdue"),
        ]
        for payload in payloads:
            await client.post("/api/finance/invoices", json=payload, headers=auth_headers)

        data = (await client.get("/api/finance/stats", headers=auth_headers)).json()
        assert data["totalRevenue"] == 2850
        assert data["pendingAmount"] == 500
        assert data["overdueAmount"] == 150
        assert data["revenueByService"] == [
            {"service": "Consulting", "value": 1200},
            {"service": "Design", "value": 1000},
        ]
        assert data["monthlyRevenue"] == [
            {"month": 1, "revenue": 200},
            {"month": 3, "revenue": 1300},
        ]

    async def test_stats_are_repeatable(self, client: AsyncClient, auth_headers: dict):
        await client.post("/api/finance/invoices", json=invoice_payload(80, "Paid"), headers=auth_headers)

        first = (await client.get("/api/finance/stats", headers=auth_headers)).json()
        second = (await client.get("/api/finance/stats", headers=auth_headers)).json()
        assert first == second
