"""Candidate ordering."""

from __future__ import annotations

import unicodedata
from typing import Callable, Iterable

from ..schemas import Candidate, SortOption


def collation_key(value: str) -> tuple[str, str, str]:
    """Locale-style sort key: base letters first, then accents, then case.

    Lowercase sorts before uppercase when everything else is equal.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


_SORT_KEYS: dict[SortOption, tuple[Callable[[Candidate], object], bool]] = {
    SortOption.NAME_ASC: (lambda candidate: collation_key(candidate.name), False),
    SortOption.EXPERIENCE_DESC: (lambda candidate: candidate.experience, True),
}


def sort_candidates(candidates: Iterable[Candidate], by: SortOption) -> list[Candidate]:
    """Return a new, stably sorted list. The input is never modified."""
    key, reverse = _SORT_KEYS[SortOption(by)]
    # sorted() keeps ties in input order even with reverse=True.
    return sorted(candidates, key=key, reverse=reverse)


def parse_sort_option(raw: str | SortOption | None) -> SortOption:
    """Map an external value (query string, CLI flag) to a sort option.

    Absent or unrecognized values fall back to name ascending.
    """
    if isinstance(raw, SortOption):
        return raw
    try:
        return SortOption((raw or "").strip())
    except ValueError:
        return SortOption.NAME_ASC
