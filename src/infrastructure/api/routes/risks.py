"""
Dependency risk and dependency map summary API routes.
"""

import logging
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from src.application.dtos.dependency_risk_dto import AssessDependencyRiskRequest
from src.application.use_cases.assess_dependency_risk import (
    AssessDependencyRiskUseCase,
    ListDependencyRisksUseCase,
)
from src.application.use_cases.get_dependency_map_summary import (
    GetDependencyMapSummaryUseCase,
)
from src.infrastructure.api.dependencies import (
    get_assess_dependency_risk_use_case,
    get_dependency_map_summary_use_case,
    get_list_dependency_risks_use_case,
)
from src.infrastructure.api.middleware.auth import verify_api_key
from src.infrastructure.api.schemas.dependency_risk_schema import (
    AssessDependencyRiskApiRequest,
    DependencyMapSummaryApiResponse,
    DependencyRiskApiResponse,
    DependencyRiskListApiResponse,
)
from src.infrastructure.api.schemas.error_schema import ProblemDetails
from src.infrastructure.observability.metrics import record_risk_assessment

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{org_id}/risks",
    response_model=DependencyRiskApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Assess dependency risk",
    description="Record a likelihood/impact assessment; the rating is derived from their product",
    responses={
        400: {"model": ProblemDetails, "description": "Unknown dependency or invalid scores"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def assess_risk(
    request: AssessDependencyRiskApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: AssessDependencyRiskUseCase = Depends(get_assess_dependency_risk_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyRiskApiResponse:
    try:
        result = await use_case.execute(
            AssessDependencyRiskRequest(
                org_id=org_id,
                dependency_id=UUID(request.dependency_id),
                risk_category=request.risk_category,
                likelihood_score=request.likelihood_score,
                impact_score=request.impact_score,
                mitigation_strategy=request.mitigation_strategy,
                contingency_plan=request.contingency_plan,
                assessor_name=request.assessor_name,
                last_assessment_date=request.last_assessment_date,
                next_assessment_date=request.next_assessment_date,
            )
        )
        record_risk_assessment(result.risk_rating)
        return DependencyRiskApiResponse(**asdict(result))

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error assessing risk for org {org_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while recording the assessment",
        ) from e


@router.get(
    "/{org_id}/risks",
    response_model=DependencyRiskListApiResponse,
    status_code=status.HTTP_200_OK,
    summary="List dependency risks",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def list_risks(
    org_id: UUID = Path(..., description="Organization UUID"),
    dependency_id: UUID | None = Query(None, description="Only this dependency's risks"),
    use_case: ListDependencyRisksUseCase = Depends(get_list_dependency_risks_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyRiskListApiResponse:
    results = await use_case.execute(org_id, dependency_id=dependency_id)
    return DependencyRiskListApiResponse(
        risks=[DependencyRiskApiResponse(**asdict(r)) for r in results],
        total=len(results),
    )


@router.get(
    "/{org_id}/dependency-map/summary",
    response_model=DependencyMapSummaryApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Dependency map summary",
    description="Counts of dependencies, critical connections, high risks, and single points of failure",
    responses={
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def dependency_map_summary(
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: GetDependencyMapSummaryUseCase = Depends(get_dependency_map_summary_use_case),
    current_user: str = Depends(verify_api_key),
) -> DependencyMapSummaryApiResponse:
    result = await use_case.execute(org_id)
    return DependencyMapSummaryApiResponse(**asdict(result))
