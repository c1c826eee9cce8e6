"""E2E tests for failure scenarios and simulation runs."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.domain.services.failure_propagation_simulator import FailurePropagationSimulator
from src.infrastructure.api.dependencies import get_failure_propagation_simulator
from src.infrastructure.api.main import app


def org_url(org_id: str, path: str) -> str:
    return f"/api/v1/organizations/{org_id}/{path}"


@pytest.fixture
def use_simulator():
    """Swap in a simulator for the duration of a test."""

    def install(simulator: FailurePropagationSimulator) -> None:
        app.dependency_overrides[get_failure_propagation_simulator] = lambda: simulator

    yield install
    app.dependency_overrides.pop(get_failure_propagation_simulator, None)


@pytest.fixture
def always_propagates(use_simulator):
    use_simulator(FailurePropagationSimulator(random_source=lambda: 0.0))


async def build_chain(client: AsyncClient, org_id: str) -> list[dict]:
    """Register data centre -> core banking -> payments, 10 minutes apart."""
    dependencies = []
    for name, mtd in (("Data centre", 12), ("Core banking", 4), ("Payments", 2)):
        response = await client.post(
            org_url(org_id, "dependencies"),
            json={
                "name": name,
                "dependency_type": "system",
                "maximum_tolerable_downtime_hours": mtd,
            },
        )
        dependencies.append(response.json())

    for source, target in zip(dependencies, dependencies[1:]):
        response = await client.post(
            org_url(org_id, "relationships"),
            json={
                "source_dependency_id": source["id"],
                "target_dependency_id": target["id"],
                "failure_propagation_likelihood": 1.0,
                "propagation_delay_minutes": 10,
            },
        )
        assert response.status_code == 201
    return dependencies


async def create_scenario(
    client: AsyncClient, org_id: str, trigger_id: str, severity: str = "critical"
) -> dict:
    response = await client.post(
        org_url(org_id, "scenarios"),
        json={
            "name": "Data centre power loss",
            "trigger_dependency_id": trigger_id,
            "scenario_type": "natural_disaster",
            "severity_level": severity,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestScenarioEndpoints:
    """Test scenario definition."""

    @pytest.mark.asyncio
    async def test_create_and_list_scenarios(self, async_client: AsyncClient):
        org_id = str(uuid4())
        dependencies = await build_chain(async_client, org_id)

        scenario = await create_scenario(async_client, org_id, dependencies[0]["id"])
        listed = (await async_client.get(org_url(org_id, "scenarios"))).json()

        assert scenario["simulation_results"] is None
        assert listed["total"] == 1
        assert listed["scenarios"][0]["id"] == scenario["id"]

    @pytest.mark.asyncio
    async def test_unknown_trigger_rejected(self, async_client: AsyncClient):
        response = await async_client.post(
            org_url(str(uuid4()), "scenarios"),
            json={"name": "Ghost outage", "trigger_dependency_id": str(uuid4())},
        )

        assert response.status_code == 400


class TestSimulationEndpoint:
    """Test running failure simulations."""

    @pytest.mark.asyncio
    async def test_simulation_follows_chain(
        self, async_client: AsyncClient, always_propagates
    ):
        """Test a certain cascade through a three-step chain."""
        org_id = str(uuid4())
        dependencies = await build_chain(async_client, org_id)
        scenario = await create_scenario(async_client, org_id, dependencies[0]["id"])

        response = await async_client.post(
            org_url(org_id, f"scenarios/{scenario['id']}/simulate")
        )

        assert response.status_code == 200
        result = response.json()
        assert result["initial_severity"] == "critical"
        assert result["total_affected_dependencies"] == 3
        assert result["estimated_total_downtime_hours"] == 18.0
        assert [s["dependency_name"] for s in result["propagation_path"]] == [
            "Data centre",
            "Core banking",
            "Payments",
        ]
        assert [s["affected_at_minutes"] for s in result["propagation_path"]] == [0, 10, 20]
        assert len(result["critical_path"]) == 3

    @pytest.mark.asyncio
    async def test_simulation_result_is_stored_on_scenario(
        self, async_client: AsyncClient, always_propagates
    ):
        """Test the latest run is readable from the scenario afterwards."""
        org_id = str(uuid4())
        dependencies = await build_chain(async_client, org_id)
        scenario = await create_scenario(async_client, org_id, dependencies[1]["id"], "low")

        await async_client.post(org_url(org_id, f"scenarios/{scenario['id']}/simulate"))
        stored = (await async_client.get(org_url(org_id, f"scenarios/{scenario['id']}"))).json()

        assert stored["last_simulated_at"] is not None
        assert stored["simulation_results"]["total_affected_dependencies"] == 2
        assert stored["simulation_results"]["trigger_dependency_id"] == dependencies[1]["id"]

    @pytest.mark.asyncio
    async def test_unlikely_edges_do_not_propagate(
        self, async_client: AsyncClient, use_simulator
    ):
        """Test that only the trigger is affected when every draw fails."""
        use_simulator(FailurePropagationSimulator(random_source=lambda: 0.99))
        org_id = str(uuid4())
        dependencies = await build_chain(async_client, org_id)
        scenario = await create_scenario(async_client, org_id, dependencies[0]["id"], "low")

        response = await async_client.post(
            org_url(org_id, f"scenarios/{scenario['id']}/simulate")
        )

        assert response.json()["total_affected_dependencies"] == 1

    @pytest.mark.asyncio
    async def test_unknown_scenario_returns_404(self, async_client: AsyncClient):
        response = await async_client.post(
            org_url(str(uuid4()), f"scenarios/{uuid4()}/simulate")
        )

        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"

    @pytest.mark.asyncio
    async def test_oversized_graph_returns_422(
        self, async_client: AsyncClient, use_simulator
    ):
        """Test that exceeding the visit ceiling is reported as 422."""
        use_simulator(
            FailurePropagationSimulator(random_source=lambda: 0.0, max_visited=2)
        )
        org_id = str(uuid4())
        dependencies = await build_chain(async_client, org_id)
        scenario = await create_scenario(async_client, org_id, dependencies[0]["id"])

        response = await async_client.post(
            org_url(org_id, f"scenarios/{scenario['id']}/simulate")
        )

        assert response.status_code == 422
        assert "visited dependencies" in response.json()["detail"]
