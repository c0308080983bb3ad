"""Fetch live PrizePicks projections and flatten them into prop records."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from evplus.config import League, UpstreamSettings, get_league
from evplus.errors import FetchFailed, UnsupportedLeague
from evplus.models import PropRecord


logger = logging.getLogger("uvicorn.error")

PLAYER_ENTITY_TYPE = "new-player"
UNKNOWN_PLAYER = "Unknown"


def resolve_league(league: str) -> League:
    """Return the configured league for ``league`` or raise UnsupportedLeague."""

    try:
        return get_league(league)
    except KeyError as exc:
        raise UnsupportedLeague(league) from exc


def _collection(payload: Mapping[str, Any], key: str) -> List[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise FetchFailed(f"Malformed projections response: {key!r} is not a list")
    return value


def _player_names(included: List[Any]) -> Dict[str, str]:
    names: Dict[str, str] = {}
    for entity in included:
        if not isinstance(entity, Mapping) or entity.get("type") != PLAYER_ENTITY_TYPE:
            continue
        entity_id = entity.get("id")
        attributes = entity.get("attributes") or {}
        name = attributes.get("name") if isinstance(attributes, Mapping) else None
        if entity_id is None or not name:
            continue
        names[str(entity_id)] = name
    return names


def parse_projections(payload: Any, league: str) -> List[PropRecord]:
    """Flatten a projections payload into records, preserving upstream order.

    Player names are joined from the ``included`` entities of type
    ``new-player``. Rows whose player cannot be resolved are labelled
    ``"Unknown"``; a missing team becomes an empty string. ``stat`` and
    ``line`` are carried through verbatim, including when absent.
    """

    if not isinstance(payload, Mapping):
        raise FetchFailed("Malformed projections response: expected a JSON object")

    names = _player_names(_collection(payload, "included"))
    label = league.upper()

    records: List[PropRecord] = []
    for row in _collection(payload, "data"):
        attributes = row.get("attributes") if isinstance(row, Mapping) else None
        if not isinstance(attributes, Mapping):
            attributes = {}
        player_id = attributes.get("new_player_id")
        player = names.get(str(player_id)) if player_id is not None else None
        records.append(
            PropRecord(
                player=player or UNKNOWN_PLAYER,
                stat=attributes.get("stat_type"),
                line=attributes.get("line_score"),
                team=attributes.get("team") or "",
                league=label,
            )
        )
    return records


async def fetch_props(
    league: str = "nba",
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[UpstreamSettings] = None,
) -> List[PropRecord]:
    """Fetch the current projections for ``league`` and return prop records.

    Exactly one GET is issued per call. Pass ``client`` to reuse a configured
    ``httpx.AsyncClient`` (tests inject one backed by ``httpx.MockTransport``);
    otherwise a short-lived client is opened for the call.
    """

    resolved = resolve_league(league)
    upstream = settings or UpstreamSettings()

    if client is None:
        async with httpx.AsyncClient(timeout=upstream.timeout) as owned:
            payload = await _get_projections(owned, resolved, upstream)
    else:
        payload = await _get_projections(client, resolved, upstream)

    records = parse_projections(payload, league.strip())
    logger.info(
        "Fetched %d props for %s (league_id=%d)",
        len(records),
        resolved.label,
        resolved.league_id,
    )
    return records


async def _get_projections(client: httpx.AsyncClient, league: League, upstream: UpstreamSettings) -> Any:
    try:
        response = await client.get(
            upstream.url,
            params=upstream.params(league.league_id),
            headers=dict(upstream.headers),
            timeout=upstream.timeout,
        )
        response.raise_for_status()
    except httpx.TimeoutException as exc:
        logger.warning("Projections request for %s timed out after %.1fs", league.label, upstream.timeout)
        raise FetchFailed(f"Projections request timed out after {upstream.timeout:g}s") from exc
    except httpx.HTTPStatusError as exc:
        logger.warning("Projections request for %s returned %s", league.label, exc.response.status_code)
        raise FetchFailed(f"Projections request failed with status {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        logger.warning("Projections request for %s failed: %s", league.label, exc)
        raise FetchFailed(f"Projections request failed: {exc}") from exc

    try:
        return response.json()
    except ValueError as exc:
        raise FetchFailed("Projections response was not valid JSON") from exc
