"""Failure scenario repository implementation using PostgreSQL.

Simulation results are stored as JSONB on the scenario row.
"""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.failure_scenario import FailureScenario, ScenarioType
from src.domain.entities.failure_simulation import Severity, SimulationResult
from src.domain.repositories.failure_scenario_repository import (
    FailureScenarioRepositoryInterface,
)
from src.infrastructure.database.models import FailureScenarioModel


class FailureScenarioRepository(FailureScenarioRepositoryInterface):
    """PostgreSQL implementation of FailureScenarioRepositoryInterface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, org_id: UUID, scenario_id: UUID) -> FailureScenario | None:
        stmt = select(FailureScenarioModel).where(
            FailureScenarioModel.org_id == org_id,
            FailureScenarioModel.id == scenario_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def list_by_org(self, org_id: UUID) -> list[FailureScenario]:
        stmt = (
            select(FailureScenarioModel)
            .where(FailureScenarioModel.org_id == org_id)
            .order_by(FailureScenarioModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def create(self, scenario: FailureScenario) -> FailureScenario:
        model = self._to_model(scenario)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)

        return self._to_entity(model)

    async def save_simulation_results(self, scenario: FailureScenario) -> FailureScenario:
        """Overwrite the stored simulation result.

        Raises:
            ValueError: If scenario does not exist
        """
        stmt = (
            update(FailureScenarioModel)
            .where(
                FailureScenarioModel.org_id == scenario.org_id,
                FailureScenarioModel.id == scenario.id,
            )
            .values(
                simulation_results=(
                    scenario.simulation_results.to_dict()
                    if scenario.simulation_results
                    else None
                ),
                last_simulated_at=scenario.last_simulated_at,
                updated_at=scenario.updated_at,
            )
            .returning(FailureScenarioModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise ValueError(f"Failure scenario with id '{scenario.id}' does not exist")

        return self._to_entity(model)

    def _to_entity(self, model: FailureScenarioModel) -> FailureScenario:
        """Convert SQLAlchemy model to domain entity."""
        return FailureScenario(
            id=model.id,
            org_id=model.org_id,
            name=model.name,
            trigger_dependency_id=model.trigger_dependency_id,
            scenario_type=ScenarioType(model.scenario_type),
            severity_level=Severity(model.severity_level),
            description=model.description,
            estimated_duration_hours=model.estimated_duration_hours,
            business_impact_description=model.business_impact_description,
            simulation_results=(
                SimulationResult.from_dict(model.simulation_results)
                if model.simulation_results
                else None
            ),
            last_simulated_at=model.last_simulated_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: FailureScenario) -> FailureScenarioModel:
        """Convert domain entity to SQLAlchemy model."""
        return FailureScenarioModel(
            id=entity.id,
            org_id=entity.org_id,
            name=entity.name,
            trigger_dependency_id=entity.trigger_dependency_id,
            scenario_type=entity.scenario_type.value,
            severity_level=entity.severity_level.value,
            description=entity.description,
            estimated_duration_hours=entity.estimated_duration_hours,
            business_impact_description=entity.business_impact_description,
            simulation_results=(
                entity.simulation_results.to_dict() if entity.simulation_results else None
            ),
            last_simulated_at=entity.last_simulated_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
