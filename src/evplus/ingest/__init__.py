"""Input adapters that normalize upstream projection data."""

from .prizepicks import fetch_props, parse_projections, resolve_league

__all__ = [
    "fetch_props",
    "parse_projections",
    "resolve_league",
]
