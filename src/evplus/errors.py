"""Errors surfaced to the HTTP layer as 500 responses."""

from __future__ import annotations


class PropsError(RuntimeError):
    """Base class for failures while producing a props listing or export."""


class UnsupportedLeague(PropsError):
    """Raised when a league key is not in the league table."""

    def __init__(self, league: str) -> None:
        super().__init__(f"Unsupported league: {league}")
        self.league = league


class FetchFailed(PropsError):
    """Raised when the projections endpoint cannot be reached or parsed."""


class RenderFailed(PropsError):
    """Raised when the PDF export cannot be produced."""


__all__ = ["PropsError", "UnsupportedLeague", "FetchFailed", "RenderFailed"]
