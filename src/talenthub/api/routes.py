"""
Candidate API routes

Endpoints:
- GET /candidates - list candidates, ``?sort=name-asc|experience-desc``
- GET /candidates/{candidate_id} - candidate detail
- GET /strengths/{candidate_id} - mock AI strengths for a candidate id
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from ..core import CandidateRepository, StrengthsGenerator, parse_sort_option, sort_candidates
from ..schemas import CandidateListResponse, ErrorResponse, StrengthsResponse

router = APIRouter(tags=["Candidates"])
logger = structlog.get_logger(__name__)


def get_repository(request: Request) -> CandidateRepository:
    return request.app.state.container.candidate_repository()


def get_strengths_resolver(request: Request) -> StrengthsGenerator:
    return request.app.state.container.strengths_resolver()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("/candidates", response_model=CandidateListResponse)
async def list_candidates(
    sort: str | None = Query(default=None),
    repository: CandidateRepository = Depends(get_repository),
) -> Any:
    sort_option = parse_sort_option(sort)
    candidates = sort_candidates(repository.list_all(), sort_option)
    logger.info("candidates.listed", sort=sort_option.value, total=len(candidates))
    return CandidateListResponse(
        total=len(candidates),
        sort=sort_option,
        candidates=candidates,
    )


@router.get(
    "/candidates/{candidate_id}",
    responses={404: {"model": ErrorResponse}},
)
async def get_candidate(
    candidate_id: str,
    repository: CandidateRepository = Depends(get_repository),
) -> Any:
    candidate = repository.find_by_id(candidate_id)
    if candidate is None:
        return _error(404, "Candidate not found")
    return candidate


# ``:path`` lets ``/strengths/`` reach the handler with an empty id;
# multi-segment ids are rejected in the handler.
@router.get(
    "/strengths/{candidate_id:path}",
    response_model=StrengthsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_strengths(
    candidate_id: str,
    resolver: StrengthsGenerator = Depends(get_strengths_resolver),
) -> Any:
    if not candidate_id:
        return _error(400, "Candidate ID is required")
    if "/" in candidate_id:
        return _error(404, "Not Found")

    try:
        strengths = await resolver.resolve_remote(candidate_id)
    except Exception as exc:  # noqa: BLE001
        logger.error("strengths.failed", candidate_id=candidate_id, error=str(exc))
        return _error(500, str(exc) or "Failed to generate strengths")

    return StrengthsResponse(strengths=strengths)
