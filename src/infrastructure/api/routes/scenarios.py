"""
Failure scenario API routes.

Implements scenario definition and failure propagation simulation.
"""

import logging
import time
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, status

from src.application.dtos.failure_scenario_dto import (
    CreateFailureScenarioRequest,
    RunFailureSimulationRequest,
)
from src.application.use_cases.manage_failure_scenarios import (
    CreateFailureScenarioUseCase,
    GetFailureScenarioUseCase,
    ListFailureScenariosUseCase,
)
from src.application.use_cases.run_failure_simulation import (
    RunFailureSimulationUseCase,
)
from src.domain.services.failure_propagation_simulator import (
    DependencyNotFoundError,
    GraphTooLargeError,
)
from src.infrastructure.api.dependencies import (
    get_create_failure_scenario_use_case,
    get_get_failure_scenario_use_case,
    get_list_failure_scenarios_use_case,
    get_run_failure_simulation_use_case,
)
from src.infrastructure.api.middleware.auth import verify_api_key
from src.infrastructure.api.schemas.error_schema import ProblemDetails
from src.infrastructure.api.schemas.failure_scenario_schema import (
    CreateFailureScenarioApiRequest,
    FailureScenarioApiResponse,
    FailureScenarioListApiResponse,
    SimulationResultApiResponse,
)
from src.infrastructure.observability.metrics import record_failure_simulation
from src.infrastructure.observability.tracing import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

router = APIRouter()


@router.post(
    "/{org_id}/scenarios",
    response_model=FailureScenarioApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Define failure scenario",
    responses={
        400: {"model": ProblemDetails, "description": "Unknown trigger dependency"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def create_scenario(
    request: CreateFailureScenarioApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: CreateFailureScenarioUseCase = Depends(get_create_failure_scenario_use_case),
    current_user: str = Depends(verify_api_key),
) -> FailureScenarioApiResponse:
    """Define a failure scenario triggered by one of the organization's dependencies."""
    try:
        result = await use_case.execute(
            CreateFailureScenarioRequest(
                org_id=org_id,
                name=request.name,
                trigger_dependency_id=UUID(request.trigger_dependency_id),
                scenario_type=request.scenario_type,
                severity_level=request.severity_level,
                description=request.description,
                estimated_duration_hours=request.estimated_duration_hours,
                business_impact_description=request.business_impact_description,
            )
        )
        return FailureScenarioApiResponse(**asdict(result))

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error creating scenario for org {org_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while creating the scenario",
        ) from e


@router.get(
    "/{org_id}/scenarios",
    response_model=FailureScenarioListApiResponse,
    status_code=status.HTTP_200_OK,
    summary="List failure scenarios",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def list_scenarios(
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: ListFailureScenariosUseCase = Depends(get_list_failure_scenarios_use_case),
    current_user: str = Depends(verify_api_key),
) -> FailureScenarioListApiResponse:
    results = await use_case.execute(org_id)
    return FailureScenarioListApiResponse(
        scenarios=[FailureScenarioApiResponse(**asdict(r)) for r in results],
        total=len(results),
    )


@router.get(
    "/{org_id}/scenarios/{scenario_id}",
    response_model=FailureScenarioApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Get failure scenario",
    description="Scenario definition with its most recent simulation result",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        404: {"model": ProblemDetails, "description": "Scenario not found"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def get_scenario(
    org_id: UUID = Path(..., description="Organization UUID"),
    scenario_id: UUID = Path(..., description="Scenario UUID"),
    use_case: GetFailureScenarioUseCase = Depends(get_get_failure_scenario_use_case),
    current_user: str = Depends(verify_api_key),
) -> FailureScenarioApiResponse:
    result = await use_case.execute(org_id, scenario_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Scenario '{scenario_id}' not found",
        )
    return FailureScenarioApiResponse(**asdict(result))


@router.post(
    "/{org_id}/scenarios/{scenario_id}/simulate",
    response_model=SimulationResultApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Run failure simulation",
    description=(
        "Propagate the scenario's trigger failure through the dependency map and "
        "store the result on the scenario"
    ),
    responses={
        400: {"model": ProblemDetails, "description": "Invalid relationship data"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        404: {
            "model": ProblemDetails,
            "description": "Scenario or a reached dependency not found",
        },
        422: {"model": ProblemDetails, "description": "Dependency graph too large"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def simulate_scenario(
    org_id: UUID = Path(..., description="Organization UUID"),
    scenario_id: UUID = Path(..., description="Scenario UUID"),
    use_case: RunFailureSimulationUseCase = Depends(get_run_failure_simulation_use_case),
    current_user: str = Depends(verify_api_key),
) -> SimulationResultApiResponse:
    """
    Simulate how the scenario's trigger failure cascades.

    Every run overwrites the scenario's previous simulation result. Runs are
    stochastic unless SIMULATION_RANDOM_SEED is configured.

    **Rate Limit:** 20 requests/minute per API key
    """
    start_time = time.perf_counter()

    with tracer.start_as_current_span("failure_simulation") as span:
        span.set_attribute("org_id", str(org_id))
        span.set_attribute("scenario_id", str(scenario_id))
        try:
            result = await use_case.execute(
                RunFailureSimulationRequest(org_id=org_id, scenario_id=scenario_id)
            )
            if result is None:
                record_failure_simulation(
                    "unknown", "not_found", time.perf_counter() - start_time
                )
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Scenario '{scenario_id}' not found",
                )

            span.set_attribute("affected_dependencies", result.total_affected_dependencies)
            record_failure_simulation(
                result.initial_severity,
                "success",
                time.perf_counter() - start_time,
                affected_dependencies=result.total_affected_dependencies,
            )
            return SimulationResultApiResponse(**asdict(result))

        except HTTPException:
            raise
        except DependencyNotFoundError as e:
            record_failure_simulation("unknown", "not_found", time.perf_counter() - start_time)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except GraphTooLargeError as e:
            record_failure_simulation("unknown", "too_large", time.perf_counter() - start_time)
            logger.warning(f"Simulation of scenario {scenario_id} aborted: {e}")
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
            ) from e
        except ValueError as e:
            record_failure_simulation("unknown", "invalid", time.perf_counter() - start_time)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            logger.error(f"Error simulating scenario {scenario_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An unexpected error occurred while running the simulation",
            ) from e
