"""
Dependency relationship API routes.

Maps the directed edges along which failures propagate.
"""

import logging
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.exc import IntegrityError

from src.application.dtos.dependency_dto import CreateRelationshipRequest
from src.application.use_cases.map_dependency_relationships import (
    CreateRelationshipUseCase,
    DeleteRelationshipUseCase,
    ListRelationshipsUseCase,
)
from src.infrastructure.api.dependencies import (
    get_create_relationship_use_case,
    get_delete_relationship_use_case,
    get_list_relationships_use_case,
)
from src.infrastructure.api.middleware.auth import verify_api_key
from src.infrastructure.api.schemas.dependency_schema import (
    CreateRelationshipApiRequest,
    RelationshipApiResponse,
    RelationshipListApiResponse,
)
from src.infrastructure.api.schemas.error_schema import ProblemDetails

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{org_id}/relationships",
    response_model=RelationshipApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Map relationship",
    description="Create a directed edge: failure of the source may affect the target",
    responses={
        400: {
            "model": ProblemDetails,
            "description": "Unknown endpoint, self-loop, or invalid likelihood/delay",
        },
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        409: {"model": ProblemDetails, "description": "Relationship already exists"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def create_relationship(
    request: CreateRelationshipApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: CreateRelationshipUseCase = Depends(get_create_relationship_use_case),
    current_user: str = Depends(verify_api_key),
) -> RelationshipApiResponse:
    """Create a relationship between two dependencies of the organization."""
    try:
        result = await use_case.execute(
            CreateRelationshipRequest(
                org_id=org_id,
                source_dependency_id=UUID(request.source_dependency_id),
                target_dependency_id=UUID(request.target_dependency_id),
                relationship_type=request.relationship_type,
                relationship_strength=request.relationship_strength,
                failure_propagation_likelihood=request.failure_propagation_likelihood,
                propagation_delay_minutes=request.propagation_delay_minutes,
                description=request.description,
            )
        )
        return RelationshipApiResponse(**asdict(result))

    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=(
                f"Relationship {request.source_dependency_id} -> "
                f"{request.target_dependency_id} ({request.relationship_type}) already exists"
            ),
        ) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error creating relationship for org {org_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while creating the relationship",
        ) from e


@router.get(
    "/{org_id}/relationships",
    response_model=RelationshipListApiResponse,
    status_code=status.HTTP_200_OK,
    summary="List relationships",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def list_relationships(
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: ListRelationshipsUseCase = Depends(get_list_relationships_use_case),
    current_user: str = Depends(verify_api_key),
) -> RelationshipListApiResponse:
    """List every relationship of the organization's dependency map."""
    results = await use_case.execute(org_id)
    return RelationshipListApiResponse(
        relationships=[RelationshipApiResponse(**asdict(r)) for r in results],
        total=len(results),
    )


@router.delete(
    "/{org_id}/relationships/{relationship_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete relationship",
    response_class=Response,
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        404: {"model": ProblemDetails, "description": "Relationship not found"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def delete_relationship(
    org_id: UUID = Path(..., description="Organization UUID"),
    relationship_id: UUID = Path(..., description="Relationship UUID"),
    use_case: DeleteRelationshipUseCase = Depends(get_delete_relationship_use_case),
    current_user: str = Depends(verify_api_key),
) -> Response:
    """Delete a relationship."""
    deleted = await use_case.execute(org_id, relationship_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Relationship '{relationship_id}' not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
