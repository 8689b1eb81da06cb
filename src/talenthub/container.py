"""Dependency injection container for the candidate service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import CandidateRepository, StrengthsConfig, StrengthsResolver


class AppContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    candidate_repository = providers.Singleton(CandidateRepository)

    strengths_config = providers.Singleton(
        StrengthsConfig,
        delay_seconds=config.strengths.delay_seconds.as_float(),
    )

    strengths_resolver = providers.Singleton(
        StrengthsResolver,
        config=strengths_config,
    )


DEFAULT_SETTINGS: dict = {
    "strengths": {"delay_seconds": StrengthsConfig().delay_seconds},
}


def create_container(*, settings: dict | None = None) -> AppContainer:
    """Instantiate container with optional overrides."""

    container = AppContainer()
    container.config.from_dict(DEFAULT_SETTINGS)

    if settings and isinstance(settings, dict):
        container.config.from_dict(settings)

    return container
