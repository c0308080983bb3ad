import json

from evplus import cli
from evplus.errors import UnsupportedLeague
from evplus.models import PropRecord


def _fake_fetch(records):
    async def fetch(league, *, settings=None):
        if league == "curling":
            raise UnsupportedLeague(league)
        return records

    return fetch


def test_props_command_prints_json(monkeypatch, capsys):
    record = PropRecord(player="John Doe", stat="Points", line=21.5, team="LAL", league="NBA")
    monkeypatch.setattr(cli, "fetch_props", _fake_fetch([record]))

    assert cli.main(["props", "--league", "nba"]) == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed == [record.model_dump()]


def test_props_command_writes_pdf_into_directory(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(cli, "fetch_props", _fake_fetch([]))

    assert cli.main(["props", "--league", "mlb", "--pdf", str(tmp_path)]) == 0

    [written] = list(tmp_path.glob("prizepicks_mlb_*.pdf"))
    assert written.read_bytes().startswith(b"%PDF-")
    assert "Wrote 0 props" in capsys.readouterr().out


def test_props_command_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr(cli, "fetch_props", _fake_fetch([]))

    assert cli.main(["props", "--league", "curling"]) == 1
    assert "Unsupported league: curling" in capsys.readouterr().out
