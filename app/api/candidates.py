"""Candidate routes: CRUD, search and skill association."""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_candidate_service
from app.core.exceptions import CandidateServiceError, InvalidInputError, NotFoundError
from app.models.candidate import Candidate
from app.schemas.candidate import (
    AddSkillsRequest,
    ApiResponse,
    CandidateResponse,
    CreateCandidateRequest,
    CreateCandidateWithSkillsRequest,
    SkillResponse,
    UpdateCandidateRequest,
)
from app.services.candidate_service import CandidateService

router = APIRouter(prefix="/api/candidates", tags=["candidates"])


# ── helpers ───────────────────────────────────────────────────────

def candidate_to_response(candidate: Candidate) -> CandidateResponse:
    """Convert Candidate model to its API representation."""
    return CandidateResponse(
        id=candidate.id,
        name=candidate.name,
        birthday=candidate.birthday,
        phone_number=candidate.phone_number,
        email=candidate.email,
        skills=[
            SkillResponse(id=cs.skill.id, name=cs.skill.name)
            for cs in candidate.candidate_skills
        ],
    )


# ── reads ─────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=ApiResponse[list[CandidateResponse]],
    response_model_exclude_none=True,
)
async def get_all_candidates(service: CandidateService = Depends(get_candidate_service)):
    """List every candidate. An empty store is reported as a server error."""
    try:
        candidates = await service.get_all_candidates()
    except NotFoundError as e:
        raise CandidateServiceError(e.message) from e
    return ApiResponse(data=[candidate_to_response(c) for c in candidates])


@router.get(
    "/search",
    response_model=ApiResponse[list[CandidateResponse]],
    response_model_exclude_none=True,
)
async def search_candidates(
    name: str | None = Query(None),
    skill_ids: list[int] | None = Query(None, alias="skillIds"),
    service: CandidateService = Depends(get_candidate_service),
):
    """Search by name fragment and/or a set of skills (all must match)."""
    candidates = await service.search_candidates(name, skill_ids)
    return ApiResponse(data=[candidate_to_response(c) for c in candidates])


@router.get(
    "/{candidate_id}",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
)
async def get_candidate_by_id(
    candidate_id: int,
    service: CandidateService = Depends(get_candidate_service),
):
    candidate = await service.get_candidate_by_id(candidate_id)
    return ApiResponse(data=candidate_to_response(candidate))


# ── writes ────────────────────────────────────────────────────────

@router.post(
    "",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_candidate(
    body: CreateCandidateRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    candidate = await service.create_candidate(body)
    return ApiResponse(
        data=candidate_to_response(candidate), message="Candidate created successfully!"
    )


@router.post(
    "/with-skills",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_candidate_with_skills(
    body: CreateCandidateWithSkillsRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    """Create a candidate and attach skills; the candidate is removed again if attaching fails."""
    candidate = await service.create_candidate_with_skills(body)
    return ApiResponse(
        data=candidate_to_response(candidate), message="Candidate created successfully!"
    )


@router.put(
    "/{candidate_id}",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
)
async def update_candidate(
    candidate_id: int,
    body: UpdateCandidateRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    candidate = await service.update_candidate(candidate_id, body)
    return ApiResponse(
        data=candidate_to_response(candidate), message="Candidate updated successfully!"
    )


@router.delete(
    "/{candidate_id}",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
)
async def delete_candidate(
    candidate_id: int,
    service: CandidateService = Depends(get_candidate_service),
):
    await service.delete_candidate(candidate_id)
    return ApiResponse(message="Candidate deleted successfully!")


# ── skills ────────────────────────────────────────────────────────

@router.post(
    "/{candidate_id}/skills/batch",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
)
async def add_skills_to_candidate(
    candidate_id: int,
    body: AddSkillsRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    if not body.skill_ids:
        raise InvalidInputError("SkillIds array cannot be empty", field="skillIds")

    await service.add_skills_to_candidate(candidate_id, body.skill_ids)
    candidate = await service.get_candidate_by_id(candidate_id)
    return ApiResponse(
        data=candidate_to_response(candidate), message="Skills added successfully!"
    )


@router.delete(
    "/{candidate_id}/skills/{skill_id}",
    response_model=ApiResponse[CandidateResponse],
    response_model_exclude_none=True,
)
async def remove_skill_from_candidate(
    candidate_id: int,
    skill_id: int,
    service: CandidateService = Depends(get_candidate_service),
):
    await service.remove_skill_from_candidate(candidate_id, skill_id)
    candidate = await service.get_candidate_by_id(candidate_id)
    return ApiResponse(
        data=candidate_to_response(candidate), message="Skill removed successfully!"
    )
