from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER_AVATAR = "/placeholder.svg"


class Availability(str, Enum):
    """How soon a candidate can start."""

    IMMEDIATE = "immediate"
    TWO_WEEKS = "2-weeks"
    ONE_MONTH = "1-month"

    @property
    def label(self) -> str:
        return _AVAILABILITY_LABELS[self]

    @property
    def detail_label(self) -> str:
        return _AVAILABILITY_DETAIL_LABELS[self]


_AVAILABILITY_LABELS: dict[Availability, str] = {
    Availability.IMMEDIATE: "Immediate",
    Availability.TWO_WEEKS: "2 Weeks",
    Availability.ONE_MONTH: "1 Month",
}

_AVAILABILITY_DETAIL_LABELS: dict[Availability, str] = {
    Availability.IMMEDIATE: "Available Immediately",
    Availability.TWO_WEEKS: "Available in 2 Weeks",
    Availability.ONE_MONTH: "Available in 1 Month",
}


class SortOption(str, Enum):
    """Orderings supported by the candidate list."""

    NAME_ASC = "name-asc"
    EXPERIENCE_DESC = "experience-desc"


class Candidate(BaseModel):
    """A job applicant record. Instances are immutable."""

    id: str = Field(min_length=1)
    name: str
    email: str
    role: str
    location: str
    experience: int = Field(ge=0, description="Years of experience.")
    skills: tuple[str, ...] = ()
    availability: Availability
    avatar: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def avatar_or_placeholder(self) -> str:
        return self.avatar or PLACEHOLDER_AVATAR

    def skills_preview(self, limit: int = 3) -> tuple[tuple[str, ...], int]:
        """Return the first ``limit`` skills and how many were left out."""
        shown = self.skills[:limit]
        return shown, len(self.skills) - len(shown)
