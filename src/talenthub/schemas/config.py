"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StrengthsSettings(BaseModel):
    delay_seconds: float = Field(default=0.8, ge=0.0)

    model_config = ConfigDict(extra="forbid")


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    log_level: str = "INFO"
    strengths: StrengthsSettings = Field(default_factory=StrengthsSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        """Return the subset consumed by the dependency container."""
        return {"strengths": self.strengths.model_dump()}


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    return AppConfig.model_validate(raw)
