"""E2E tests for the dependency map API endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


def org_url(org_id: str, path: str) -> str:
    return f"/api/v1/organizations/{org_id}/{path}"


async def register(client: AsyncClient, org_id: str, name: str, **fields) -> dict:
    response = await client.post(
        org_url(org_id, "dependencies"),
        json={"name": name, "dependency_type": "system", **fields},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestHealthEndpoints:
    """Test health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, async_client_no_auth: AsyncClient):
        """Test liveness probe endpoint."""
        response = await async_client_no_auth.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_health_ready_endpoint(self, async_client_no_auth: AsyncClient):
        """Test readiness probe endpoint."""
        response = await async_client_no_auth.get("/api/v1/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["checks"]["database"] == "healthy"


class TestAuthentication:
    """Test API authentication."""

    @pytest.mark.asyncio
    async def test_missing_api_key(self, async_client_no_auth: AsyncClient):
        """Test that requests without API key are rejected."""
        response = await async_client_no_auth.get(org_url(str(uuid4()), "dependencies"))

        assert response.status_code == 401
        data = response.json()
        assert data["type"] == "about:blank"
        assert data["title"] == "Unauthorized"
        assert "correlation_id" in data

    @pytest.mark.asyncio
    async def test_invalid_api_key(self, async_client_no_auth: AsyncClient):
        """Test that requests with invalid API key are rejected."""
        response = await async_client_no_auth.get(
            org_url(str(uuid4()), "dependencies"),
            headers={"Authorization": "Bearer invalid-key"},
        )

        assert response.status_code == 401
        assert response.json()["title"] == "Unauthorized"


class TestDependencyEndpoints:
    """Test dependency registration, lookup, and update."""

    @pytest.mark.asyncio
    async def test_register_and_get_dependency(self, async_client: AsyncClient):
        """Test registering a dependency and reading it back."""
        org_id = str(uuid4())

        created = await register(
            async_client,
            org_id,
            "Core banking platform",
            criticality="critical",
            maximum_tolerable_downtime_hours=4,
            recovery_time_objective_hours=2,
        )
        response = await async_client.get(org_url(org_id, f"dependencies/{created['id']}"))

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Core banking platform"
        assert data["org_id"] == org_id
        assert data["status"] == "operational"
        assert data["is_single_point_of_failure"] is True

    @pytest.mark.asyncio
    async def test_rto_above_mtd_is_rejected(self, async_client: AsyncClient):
        """Test that an RTO longer than the MTD returns 400."""
        response = await async_client.post(
            org_url(str(uuid4()), "dependencies"),
            json={
                "name": "Ledger",
                "dependency_type": "system",
                "maximum_tolerable_downtime_hours": 2,
                "recovery_time_objective_hours": 6,
            },
        )

        assert response.status_code == 400
        assert "cannot exceed" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_dependency_type_fails_validation(self, async_client: AsyncClient):
        """Test that schema validation errors return 422 Problem Details."""
        response = await async_client.post(
            org_url(str(uuid4()), "dependencies"),
            json={"name": "Thing", "dependency_type": "spaceship"},
        )

        assert response.status_code == 422
        assert response.headers["content-type"].startswith("application/problem+json")

    @pytest.mark.asyncio
    async def test_dependencies_are_scoped_to_org(self, async_client: AsyncClient):
        """Test that another organization cannot see a dependency."""
        created = await register(async_client, str(uuid4()), "HR system")

        response = await async_client.get(
            org_url(str(uuid4()), f"dependencies/{created['id']}")
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_dependency(self, async_client: AsyncClient):
        """Test updating status and redundancy."""
        org_id = str(uuid4())
        created = await register(async_client, org_id, "Card processor", criticality="critical")

        response = await async_client.patch(
            org_url(org_id, f"dependencies/{created['id']}"),
            json={"status": "degraded", "redundancy_level": "full"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["is_single_point_of_failure"] is False

    @pytest.mark.asyncio
    async def test_update_unknown_dependency(self, async_client: AsyncClient):
        """Test updating a dependency that does not exist."""
        response = await async_client.patch(
            org_url(str(uuid4()), f"dependencies/{uuid4()}"),
            json={"status": "failed"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_dependencies(self, async_client: AsyncClient):
        """Test listing an organization's dependencies."""
        org_id = str(uuid4())
        await register(async_client, org_id, "B system")
        await register(async_client, org_id, "A system")

        response = await async_client.get(org_url(org_id, "dependencies"))

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [d["name"] for d in data["dependencies"]] == ["A system", "B system"]


class TestRelationshipEndpoints:
    """Test relationship mapping."""

    @pytest.mark.asyncio
    async def test_create_list_and_delete_relationship(self, async_client: AsyncClient):
        """Test the relationship lifecycle."""
        org_id = str(uuid4())
        source = await register(async_client, org_id, "Data centre")
        target = await register(async_client, org_id, "Core banking")

        response = await async_client.post(
            org_url(org_id, "relationships"),
            json={
                "source_dependency_id": source["id"],
                "target_dependency_id": target["id"],
                "failure_propagation_likelihood": 0.75,
                "propagation_delay_minutes": 20,
            },
        )
        assert response.status_code == 201
        relationship = response.json()
        assert relationship["failure_propagation_likelihood"] == 0.75

        listed = (await async_client.get(org_url(org_id, "relationships"))).json()
        assert listed["total"] == 1

        deleted = await async_client.delete(
            org_url(org_id, f"relationships/{relationship['id']}")
        )
        assert deleted.status_code == 204

        again = await async_client.delete(org_url(org_id, f"relationships/{relationship['id']}"))
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_relationship_conflicts(self, async_client: AsyncClient):
        """Test that mapping the same edge twice returns 409."""
        org_id = str(uuid4())
        source = await register(async_client, org_id, "Identity provider")
        target = await register(async_client, org_id, "Customer portal")
        body = {"source_dependency_id": source["id"], "target_dependency_id": target["id"]}

        first = await async_client.post(org_url(org_id, "relationships"), json=body)
        second = await async_client.post(org_url(org_id, "relationships"), json=body)

        assert first.status_code == 201
        assert second.status_code == 409

    @pytest.mark.asyncio
    async def test_self_loop_rejected(self, async_client: AsyncClient):
        """Test that a dependency cannot depend on itself."""
        org_id = str(uuid4())
        dependency = await register(async_client, org_id, "Mainframe")

        response = await async_client.post(
            org_url(org_id, "relationships"),
            json={
                "source_dependency_id": dependency["id"],
                "target_dependency_id": dependency["id"],
            },
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_endpoint_from_other_org_rejected(self, async_client: AsyncClient):
        """Test that both endpoints must belong to the organization."""
        org_id = str(uuid4())
        source = await register(async_client, org_id, "Local system")
        foreign = await register(async_client, str(uuid4()), "Foreign system")

        response = await async_client.post(
            org_url(org_id, "relationships"),
            json={"source_dependency_id": source["id"], "target_dependency_id": foreign["id"]},
        )

        assert response.status_code == 400
        assert "not found in organization" in response.json()["detail"]
