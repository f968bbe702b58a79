import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


async def add_employee(client: AsyncClient, headers: dict, base: dict, **overrides) -> dict:
    response = await client.post("/api/employees", json={**base, **overrides}, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()


class TestEmployees:
    async def test_create_employee_defaults_to_active(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        data = await add_employee(client, auth_headers, employee_data)
        assert data["status"] == "Active"
        assert data["hireDate"] == "2023-02-01"
        assert data["salary"] == 60000

    async def test_negative_salary_is_rejected(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        response = await client.post(
            "/api/employees",
            json={**employee_data, "salary": -1},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "salary"

    async def test_list_is_sorted_by_name(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        await add_employee(client, auth_headers, employee_data, name="Zoe", email="zoe@example.com")
        await add_employee(client, auth_headers, employee_data, name="Adam", email="adam@example.com")

        response = await client.get("/api/employees", headers=auth_headers)
        assert [e["name"] for e in response.json()] == ["Adam", "Zoe"]

    async def test_partial_update(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        created = await add_employee(client, auth_headers, employee_data)

        response = await client.put(
            f"/api/employees/{created['id']}",
            json={"status": "Inactive"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "Inactive"
        assert data["salary"] == employee_data["salary"]
        assert data["department"] == employee_data["department"]

    async def test_delete_employee(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        created = await add_employee(client, auth_headers, employee_data)

        response = await client.delete(f"/api/employees/{created['id']}", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Employee deleted"}

        response = await client.delete(f"/api/employees/{created['id']}", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestEmployeeStats:
    async def test_stats(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        await add_employee(client, auth_headers, employee_data, email="a@example.com", salary=50000)
        await add_employee(client, auth_headers, employee_data, email="b@example.com", salary=70000)
        await add_employee(
            client, auth_headers, employee_data,
            email="c@example.com", department="Design", salary=40000
        )
        await add_employee(
            client, auth_headers, employee_data,
            email="d@example.com", department="Design", salary=90000, status="Inactive"
        )

        response = await client.get("/api/employees/stats", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "totalEmployees": 4,
            "activeEmployees": 3,
            "salaryStats": {"totalSalaries": 160000, "avgSalary": 160000 / 3},
            "departmentStats": [
                {"department": "Development", "count": 2},
                {"department": "Design", "count": 1},
            ],
        }

    async def test_stats_without_active_employees(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        await add_employee(client, auth_headers, employee_data, status="Inactive")

        data = (await client.get("/api/employees/stats", headers=auth_headers)).json()
        assert data["activeEmployees"] == 0
        assert data["salaryStats"] == {"totalSalaries": 0, "avgSalary": 0}
        assert data["departmentStats"] == []


class TestDepartments:
    async def test_default_departments_when_none_stored(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        await add_employee(client, auth_headers, employee_data)

        response = await client.get("/api/employees/departments", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {"name": "Development", "budget": 720000, "employeeCount": 1},
            {"name": "Design", "budget": 336000, "employeeCount": 0},
            {"name": "Administration", "budget": 300000, "employeeCount": 0},
            {"name": "Quality", "budget": 240000, "employeeCount": 0},
            {"name": "Sales", "budget": 350000, "employeeCount": 0},
        ]

    async def test_stored_departments_count_active_employees(self, client: AsyncClient, auth_headers: dict, employee_data: dict):
        for name, budget in (("Support", 100000), ("Marketing", 200000)):
            response = await client.post(
                "/api/employees/departments",
                json={"name": name, "budget": budget},
                headers=auth_headers
            )
            assert response.status_code == status.HTTP_201_CREATED

        await add_employee(client, auth_headers, employee_data, email="a@example.com", department="Support")
        await add_employee(client, auth_headers, employee_data, email="b@example.com", department="Support")
        await add_employee(
            client, auth_headers, employee_data,
            email="c@example.com", department="Support", status="Inactive"
        )
        # Label with no matching department is not counted anywhere
        await add_employee(client, auth_headers, employee_data, email="d@example.com", department="Legal")

        response = await client.get("/api/employees/departments", headers=auth_headers)
        assert response.json() == [
            {"name": "Marketing", "budget": 200000, "employeeCount": 0},
            {"name": "Support", "budget": 100000, "employeeCount": 2},
        ]

    async def test_duplicate_department_name(self, client: AsyncClient, auth_headers: dict):
        payload = {"name": "Support", "budget": 1000}
        await client.post("/api/employees/departments", json=payload, headers=auth_headers)
        response = await client.post("/api/employees/departments", json=payload, headers=auth_headers)
        assert response.status_code == status.HTTP_409_CONFLICT
