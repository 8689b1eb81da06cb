from __future__ import annotations

import pytest

from talenthub.core import CandidateRepository
from talenthub.data import MOCK_CANDIDATES


def test_list_all_returns_fixture_in_declaration_order():
    repository = CandidateRepository()

    candidates = repository.list_all()

    assert [c.id for c in candidates] == ["1", "2", "3", "4", "5", "6"]
    assert candidates[0].name == "Sarah Chen"
    assert len(repository) == 6


def test_list_all_is_idempotent():
    repository = CandidateRepository()

    assert repository.list_all() is repository.list_all()


def test_find_by_id_matches_every_listed_candidate():
    repository = CandidateRepository()

    for candidate in repository.list_all():
        assert repository.find_by_id(candidate.id) is candidate


@pytest.mark.parametrize("candidate_id", ["nonexistent-id", "", " 1", "01"])
def test_find_by_id_returns_none_for_unknown_ids(candidate_id):
    assert CandidateRepository().find_by_id(candidate_id) is None


def test_custom_collection_and_duplicate_ids():
    subset = CandidateRepository(MOCK_CANDIDATES[:2])
    assert [c.id for c in subset.list_all()] == ["1", "2"]

    with pytest.raises(ValueError, match="Duplicate candidate id"):
        CandidateRepository([MOCK_CANDIDATES[0], MOCK_CANDIDATES[0]])


def test_empty_repository():
    repository = CandidateRepository([])

    assert repository.list_all() == ()
    assert repository.find_by_id("1") is None
