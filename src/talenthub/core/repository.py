"""Read-only candidate repository."""

from __future__ import annotations

from typing import Iterable

from ..data import MOCK_CANDIDATES
from ..schemas import Candidate


class CandidateRepository:
    """Keyed, ordered view over a fixed candidate collection."""

    def __init__(self, candidates: Iterable[Candidate] | None = None) -> None:
        self._candidates = tuple(MOCK_CANDIDATES if candidates is None else candidates)
        self._by_id: dict[str, Candidate] = {}
        for candidate in self._candidates:
            if candidate.id in self._by_id:
                raise ValueError(f"Duplicate candidate id: {candidate.id!r}")
            self._by_id[candidate.id] = candidate

    def list_all(self) -> tuple[Candidate, ...]:
        return self._candidates

    def find_by_id(self, candidate_id: str) -> Candidate | None:
        return self._by_id.get(candidate_id)

    def __len__(self) -> int:
        return len(self._candidates)
