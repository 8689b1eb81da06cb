from __future__ import annotations

import pytest
from pydantic import ValidationError

from talenthub.schemas import PLACEHOLDER_AVATAR, Availability, Candidate, SortOption
from talenthub.schemas.config import AppConfig, load_config


def build_candidate(**kwargs) -> Candidate:
    defaults = {
        "id": "C-1",
        "name": "Test Person",
        "email": "test@example.com",
        "role": "Engineer",
        "location": "Remote",
        "experience": 2,
        "skills": ["Python", "SQL", "Docker", "Go"],
        "availability": "2-weeks",
    }
    defaults.update(kwargs)
    return Candidate(**defaults)


def test_candidate_coerces_skills_and_availability():
    candidate = build_candidate()

    assert candidate.skills == ("Python", "SQL", "Docker", "Go")
    assert candidate.availability is Availability.TWO_WEEKS
    assert candidate.avatar is None


def test_candidate_is_frozen():
    candidate = build_candidate()

    with pytest.raises(ValidationError):
        candidate.name = "Someone Else"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"experience": -1},
        {"availability": "tomorrow"},
        {"id": ""},
        {"nickname": "extra"},
    ],
)
def test_candidate_rejects_invalid_fields(overrides):
    with pytest.raises(ValidationError):
        build_candidate(**overrides)


def test_avatar_falls_back_to_placeholder():
    assert build_candidate().avatar_or_placeholder == PLACEHOLDER_AVATAR
    assert build_candidate(avatar="/me.png").avatar_or_placeholder == "/me.png"


def test_skills_preview_truncates_to_three():
    shown, hidden = build_candidate().skills_preview()

    assert shown == ("Python", "SQL", "Docker")
    assert hidden == 1

    shown, hidden = build_candidate(skills=["Rust"]).skills_preview()
    assert shown == ("Rust",)
    assert hidden == 0


def test_availability_labels():
    assert Availability.IMMEDIATE.label == "Immediate"
    assert Availability.ONE_MONTH.label == "1 Month"
    assert Availability.TWO_WEEKS.detail_label == "Available in 2 Weeks"


def test_sort_option_wire_values():
    assert SortOption("name-asc") is SortOption.NAME_ASC
    assert SortOption("experience-desc") is SortOption.EXPERIENCE_DESC


def test_load_config_defaults_and_settings():
    app_config = load_config(None)

    assert isinstance(app_config, AppConfig)
    assert app_config.strengths.delay_seconds == pytest.approx(0.8)
    assert app_config.server.port == 8000

    custom = load_config({"strengths": {"delay_seconds": 0}, "log_level": "DEBUG"})
    assert custom.to_settings() == {"strengths": {"delay_seconds": 0.0}}
    assert custom.log_level == "DEBUG"


@pytest.mark.parametrize(
    "raw",
    [
        ["not", "a", "mapping"],
        {"strengths": {"delay_seconds": -1}},
        {"server": {"port": 0}},
        {"unknown": True},
    ],
)
def test_load_config_validation(raw):
    with pytest.raises(ValidationError):
        load_config(raw)
