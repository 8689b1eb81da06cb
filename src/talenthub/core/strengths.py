"""Mock "AI strengths" enrichment for candidate detail views."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping, Sequence

import structlog

from ..data import DEFAULT_STRENGTHS, MOCK_STRENGTHS

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass
class StrengthsConfig:
    """Configuration for the simulated inference call."""

    delay_seconds: float = 0.8


class StrengthsResolver:
    """Resolve a candidate id to a list of descriptive strengths.

    Lookup is keyed on the raw id string and does not consult the candidate
    repository; ids without an entry receive ``DEFAULT_STRENGTHS``.
    ``resolve_remote`` stands in for a network call to an inference service
    and should be treated by callers as potentially slow.
    """

    def __init__(
        self,
        *,
        config: StrengthsConfig | None = None,
        table: Mapping[str, Sequence[str]] | None = None,
        default: Sequence[str] | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        self._config = config or StrengthsConfig()
        self._table = MOCK_STRENGTHS if table is None else table
        self._default = tuple(DEFAULT_STRENGTHS if default is None else default)
        self._sleep = sleep or asyncio.sleep
        self._logger = structlog.get_logger(__name__)

    def resolve_local(self, candidate_id: str) -> list[str]:
        strengths = self._table.get(candidate_id)
        if strengths is None:
            return list(self._default)
        return list(strengths)

    async def resolve_remote(self, candidate_id: str) -> list[str]:
        """Resolve after the configured latency.

        Cancellation during the delay propagates ``asyncio.CancelledError``
        and leaves nothing behind.
        """
        await self._sleep(self._config.delay_seconds)
        strengths = self.resolve_local(candidate_id)
        self._logger.debug(
            "strengths.resolved",
            candidate_id=candidate_id,
            count=len(strengths),
            fallback=candidate_id not in self._table,
        )
        return strengths
