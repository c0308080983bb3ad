"""Normalized prop records shared by the JSON and PDF outputs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic.config import ConfigDict


class PropRecord(BaseModel):
    """One flattened PrizePicks projection.

    ``stat``, ``line`` and ``team`` hold the upstream values unchanged.
    """

    player: str
    stat: Any = None
    line: Any = None
    team: Any = ""
    league: str

    model_config = ConfigDict(frozen=True)
