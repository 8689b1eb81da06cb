"""Candidate browsing core: repository, sorting and strengths lookup."""

__version__ = "0.1.0"
