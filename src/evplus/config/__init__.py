"""Configuration helpers for leagues and service settings."""

from .leagues import LEAGUE_IDS, League, get_league, iter_leagues
from .settings import Settings, UpstreamSettings, load_settings

__all__ = [
    "LEAGUE_IDS",
    "League",
    "Settings",
    "UpstreamSettings",
    "get_league",
    "iter_leagues",
    "load_settings",
]
