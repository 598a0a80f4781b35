import pytest
from httpx import AsyncClient
from fastapi import status

ALICE = {"X-Admin-Id": "alice"}
BOB = {"X-Admin-Id": "bob"}


@pytest.mark.asyncio
class TestOwnedResourceEndpoints:
    """Owner stamping, scope filter and edit guard on the HR resources"""

    async def test_create_stamps_caller_as_owner(self, client: AsyncClient):
        response = await client.post(
            "/api/departments", json={"name": "Engineering", "description": "Builds things"}, headers=ALICE
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["ownerAdminId"] == "alice"
        assert data["code"] == "D-01"
        assert data["isActive"] is True

    async def test_create_requires_admin_header(self, client: AsyncClient):
        response = await client.post("/api/departments", json={"name": "Engineering"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_scope_filter(self, client: AsyncClient):
        await client.post("/api/departments", json={"name": "Engineering"}, headers=ALICE)
        await client.post("/api/departments", json={"name": "Sales"}, headers=BOB)

        everything = await client.get("/api/departments", headers=ALICE)
        yours = await client.get("/api/departments", params={"scope": "yours"}, headers=ALICE)
        anonymous_yours = await client.get("/api/departments", params={"scope": "yours"})

        assert sorted(d["name"] for d in everything.json()) == ["Engineering", "Sales"]
        assert [d["name"] for d in yours.json()] == ["Engineering"]
        assert anonymous_yours.json() == []

    async def test_get_by_display_or_bare_id(self, client: AsyncClient):
        await client.post(
            "/api/candidates",
            json={"firstName": "Sam", "lastName": "Lee", "email": "sam.lee@example.com"},
            headers=ALICE,
        )

        prefixed = await client.get("/api/candidates/C-001")
        bare = await client.get("/api/candidates/1")
        missing = await client.get("/api/candidates/C-404")
        garbage = await client.get("/api/candidates/abc")

        assert prefixed.status_code == status.HTTP_200_OK
        assert prefixed.json()["code"] == "C-001"
        assert bare.json()["id"] == 1
        assert missing.status_code == status.HTTP_404_NOT_FOUND
        assert garbage.status_code == status.HTTP_404_NOT_FOUND

    async def test_edit_guard(self, client: AsyncClient):
        await client.post("/api/departments", json={"name": "Engineering"}, headers=ALICE)

        stranger = await client.put("/api/departments/1", json={"description": "x"}, headers=BOB)
        anonymous = await client.put("/api/departments/1", json={"description": "x"})
        owner = await client.put("/api/departments/1", json={"description": "Platform"}, headers=ALICE)
        missing = await client.put("/api/departments/99", json={"description": "x"}, headers=ALICE)

        assert stranger.status_code == status.HTTP_403_FORBIDDEN
        assert anonymous.status_code == status.HTTP_403_FORBIDDEN
        assert owner.status_code == status.HTTP_200_OK
        assert owner.json()["description"] == "Platform"
        assert missing.status_code == status.HTTP_404_NOT_FOUND

    async def test_job_application_and_leave_request_codes(self, client: AsyncClient):
        candidate = await client.post(
            "/api/candidates",
            json={"firstName": "Sam", "lastName": "Lee", "email": "sam.lee@example.com"},
            headers=ALICE,
        )
        application = await client.post(
            "/api/jobapplications",
            json={"candidateId": candidate.json()["id"], "jobTitle": "Backend Engineer"},
            headers=ALICE,
        )
        employee = await client.post(
            "/api/employees",
            json={"firstName": "Jane", "lastName": "Doe", "email": "jane.doe@example.com", "hireDate": "2024-01-15"},
            headers=ALICE,
        )
        leave = await client.post(
            "/api/leaverequests",
            json={
                "employeeId": employee.json()["id"],
                "leaveType": "Annual",
                "startDate": "2026-04-01",
                "endDate": "2026-04-03",
            },
            headers=ALICE,
        )

        assert application.status_code == status.HTTP_201_CREATED
        assert application.json()["code"] == "APP-001"
        assert leave.status_code == status.HTTP_201_CREATED
        assert leave.json()["code"] == "L-1"

    async def test_job_application_for_unknown_candidate(self, client: AsyncClient):
        response = await client.post(
            "/api/jobapplications", json={"candidateId": 42, "jobTitle": "Backend Engineer"}, headers=ALICE
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.asyncio
class TestResourceListing:
    @pytest.mark.parametrize("path", [
        "/api/departments",
        "/api/employees",
        "/api/candidates",
        "/api/jobapplications",
        "/api/leaverequests",
    ])
    async def test_list_answers_ok(self, client: AsyncClient, path):
        everything = await client.get(path, headers=ALICE)
        yours = await client.get(path, params={"scope": "yours"}, headers=ALICE)

        assert everything.status_code == status.HTTP_200_OK
        assert yours.status_code == status.HTTP_200_OK
        assert everything.json() == []

    async def test_departments_listed_by_name(self, client: AsyncClient):
        await client.post("/api/departments", json={"name": "Sales"}, headers=ALICE)
        await client.post("/api/departments", json={"name": "Engineering"}, headers=BOB)

        response = await client.get("/api/departments")

        assert response.status_code == status.HTTP_200_OK
        assert [d["name"] for d in response.json()] == ["Engineering", "Sales"]

@pytest.mark.asyncio
class TestHealth:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"
