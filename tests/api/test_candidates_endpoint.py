from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def test_list_defaults_to_name_ascending(client: TestClient):
    response = client.get("/candidates")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 6
    assert body["sort"] == "name-asc"
    assert [c["name"] for c in body["candidates"]][:2] == ["Aisha Patel", "David Kim"]


def test_list_sorted_by_experience(client: TestClient):
    response = client.get("/candidates", params={"sort": "experience-desc"})

    body = response.json()
    experiences = [c["experience"] for c in body["candidates"]]
    assert body["sort"] == "experience-desc"
    assert experiences == sorted(experiences, reverse=True)


@pytest.mark.parametrize("sort", ["", "bogus", "name-desc"])
def test_list_unrecognized_sort_falls_back(client: TestClient, sort: str):
    body = client.get("/candidates", params={"sort": sort}).json()

    assert body["sort"] == "name-asc"


def test_candidate_detail(client: TestClient):
    response = client.get("/candidates/3")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Aisha Patel"
    assert body["availability"] == "1-month"
    assert body["skills"] == ["Go", "Kubernetes", "Docker", "MongoDB", "gRPC"]


def test_candidate_detail_not_found(client: TestClient):
    response = client.get("/candidates/nonexistent-id")

    assert response.status_code == 404
    assert response.json() == {"error": "Candidate not found"}


def test_unknown_route_uses_error_shape(client: TestClient):
    response = client.get("/candidates/1/extra")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_shape(client: TestClient):
    response = client.post("/candidates")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
