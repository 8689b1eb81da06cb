"""Static fixture data standing in for a persistent store."""

from .candidates import MOCK_CANDIDATES
from .strengths import DEFAULT_STRENGTHS, MOCK_STRENGTHS

__all__ = ["DEFAULT_STRENGTHS", "MOCK_CANDIDATES", "MOCK_STRENGTHS"]
