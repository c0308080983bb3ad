import pytest
from pydantic import ValidationError

from evplus.models import PropRecord


def test_prop_record_is_frozen():
    record = PropRecord(player="John Doe", stat="Points", line=21.5, team="LAL", league="NBA")

    assert record.model_dump() == {
        "player": "John Doe",
        "stat": "Points",
        "line": 21.5,
        "team": "LAL",
        "league": "NBA",
    }

    with pytest.raises((TypeError, ValidationError)):
        record.player = "Jane Doe"  # type: ignore[misc]


def test_prop_record_allows_missing_stat_and_line():
    record = PropRecord(player="Unknown", league="MLB")

    assert record.stat is None
    assert record.line is None
    assert record.team == ""
