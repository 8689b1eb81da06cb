"""Pydantic schema definitions for candidates, responses and configuration."""

from __future__ import annotations

from .candidate import PLACEHOLDER_AVATAR, Availability, Candidate, SortOption
from .responses import CandidateListResponse, ErrorResponse, StrengthsResponse

__all__ = [
    "Availability",
    "Candidate",
    "CandidateListResponse",
    "ErrorResponse",
    "PLACEHOLDER_AVATAR",
    "SortOption",
    "StrengthsResponse",
]
