"""Candidate retrieval, ordering and strengths lookup."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .repository import CandidateRepository
from .sorting import collation_key, parse_sort_option, sort_candidates
from .strengths import StrengthsConfig, StrengthsResolver


@runtime_checkable
class StrengthsGenerator(Protocol):
    """Contract shared by the mock resolver and any real inference client."""

    def resolve_local(self, candidate_id: str) -> list[str]:
        """Return strengths without suspending."""

    async def resolve_remote(self, candidate_id: str) -> list[str]:
        """Return strengths, possibly after network latency."""


__all__ = [
    "CandidateRepository",
    "StrengthsConfig",
    "StrengthsGenerator",
    "StrengthsResolver",
    "collation_key",
    "parse_sort_option",
    "sort_candidates",
]
