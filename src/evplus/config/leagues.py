"""League keys supported by the PrizePicks projections endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping


@dataclass(frozen=True)
class League:
    key: str
    league_id: int

    @property
    def label(self) -> str:
        return self.key.upper()


_LEAGUES: Dict[str, League] = {
    "nba": League(key="nba", league_id=7),
    "mlb": League(key="mlb", league_id=10),
    "nfl": League(key="nfl", league_id=9),
    "nhl": League(key="nhl", league_id=2),
    "tennis": League(key="tennis", league_id=14),
}

# Read-only view for callers that only need key -> numeric id.
LEAGUE_IDS: Mapping[str, int] = MappingProxyType(
    {key: league.league_id for key, league in _LEAGUES.items()}
)


def iter_leagues() -> Iterable[League]:
    """Return an iterator of all configured leagues."""

    return _LEAGUES.values()


def get_league(key: str) -> League:
    """Resolve a league key case-insensitively, raising KeyError if missing."""

    normalized = key.strip().lower() if isinstance(key, str) else key
    if normalized not in _LEAGUES:
        raise KeyError(f"No league configured for key={key!r}")
    return _LEAGUES[normalized]
