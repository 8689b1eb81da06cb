"""HTTP response payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .candidate import Candidate, SortOption


class StrengthsResponse(BaseModel):
    strengths: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class CandidateListResponse(BaseModel):
    """Sorted candidate list with the ordering that was applied."""

    total: int
    sort: SortOption
    candidates: list[Candidate]
