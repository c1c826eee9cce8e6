"""
Dependency API routes.

Implements registration, lookup, listing, and resilience updates of the
dependencies in an organization's dependency map.
"""

import logging
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError

from src.application.dtos.dependency_dto import (
    RegisterDependencyRequest,
    UpdateDependencyRequest,
)
from src.application.use_cases.manage_dependencies import (
    GetDependencyUseCase,
    ListDependenciesUseCase,
    RegisterDependencyUseCase,
    UpdateDependencyUseCase,
)
from src.infrastructure.api.dependencies import (
    get_get_dependency_use_case,
    get_list_dependencies_use_case,
    get_register_dependency_use_case,
    get_update_dependency_use_case,
)
from src.infrastructure.api.middleware.auth import verify_api_key
from src.infrastructure.api.schemas.dependency_schema import (
    DependencyApiResponse,
    DependencyListApiResponse,
    RegisterDependencyApiRequest,
    UpdateDependencyApiRequest,
)
from src.infrastructure.api.schemas.error_schema import ProblemDetails

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{org_id}/dependencies",
    response_model=DependencyApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register dependency",
    description="Add a vendor, system, staff, data, or location dependency to the map",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid dependency attributes"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        409: {"model": ProblemDetails, "description": "Constraint violation"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def register_dependency(
    request: RegisterDependencyApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: RegisterDependencyUseCase = Depends(get_register_dependency_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyApiResponse:
    """Register a dependency."""
    try:
        result = await use_case.execute(
            RegisterDependencyRequest(
                org_id=org_id,
                name=request.name,
                dependency_type=request.dependency_type,
                criticality=request.criticality,
                business_function_id=(
                    UUID(request.business_function_id)
                    if request.business_function_id
                    else None
                ),
                maximum_tolerable_downtime_hours=request.maximum_tolerable_downtime_hours,
                recovery_time_objective_hours=request.recovery_time_objective_hours,
                redundancy_level=request.redundancy_level,
                monitoring_status=request.monitoring_status,
                description=request.description,
                geographic_location=request.geographic_location,
                sla_requirements=request.sla_requirements,
            )
        )
        return DependencyApiResponse(**asdict(result))

    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Dependency conflicts with existing data",
        ) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error registering dependency for org {org_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while registering the dependency",
        ) from e


@router.get(
    "/{org_id}/dependencies",
    response_model=DependencyListApiResponse,
    status_code=status.HTTP_200_OK,
    summary="List dependencies",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def list_dependencies(
    org_id: UUID = Path(..., description="Organization UUID"),
    business_function_id: UUID | None = Query(
        None, description="Only dependencies supporting this business function"
    ),
    use_case: ListDependenciesUseCase = Depends(get_list_dependencies_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyListApiResponse:
    """List an organization's dependencies ordered by name."""
    try:
        results = await use_case.execute(org_id, business_function_id=business_function_id)
        return DependencyListApiResponse(
            dependencies=[DependencyApiResponse(**asdict(r)) for r in results],
            total=len(results),
        )
    except Exception as e:
        logger.error(f"Error listing dependencies for org {org_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while listing dependencies",
        ) from e


@router.get(
    "/{org_id}/dependencies/{dependency_id}",
    response_model=DependencyApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Get dependency",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        404: {"model": ProblemDetails, "description": "Dependency not found"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def get_dependency(
    org_id: UUID = Path(..., description="Organization UUID"),
    dependency_id: UUID = Path(..., description="Dependency UUID"),
    use_case: GetDependencyUseCase = Depends(get_get_dependency_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyApiResponse:
    """Get a single dependency."""
    result = await use_case.execute(org_id, dependency_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Dependency '{dependency_id}' not found",
        )
    return DependencyApiResponse(**asdict(result))


@router.patch(
    "/{org_id}/dependencies/{dependency_id}",
    response_model=DependencyApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Update dependency",
    description="Change status, MTD/RTO, redundancy, or monitoring coverage",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid attributes"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        404: {"model": ProblemDetails, "description": "Dependency not found"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def update_dependency(
    request: UpdateDependencyApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    dependency_id: UUID = Path(..., description="Dependency UUID"),
    use_case: UpdateDependencyUseCase = Depends(get_update_dependency_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyApiResponse:
    """Update a dependency. Omitted fields are left unchanged."""
    try:
        result = await use_case.execute(
            UpdateDependencyRequest(
                org_id=org_id,
                dependency_id=dependency_id,
                status=request.status,
                maximum_tolerable_downtime_hours=request.maximum_tolerable_downtime_hours,
                recovery_time_objective_hours=request.recovery_time_objective_hours,
                redundancy_level=request.redundancy_level,
                monitoring_status=request.monitoring_status,
            )
        )
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Dependency '{dependency_id}' not found",
            )
        return DependencyApiResponse(**asdict(result))

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error updating dependency {dependency_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while updating the dependency",
        ) from e
