import re

import pytest

from evplus.errors import RenderFailed
from evplus.export import render_props_pdf
from evplus.export import pdf as pdf_export
from evplus.models import PropRecord


def _record(player: str, stat: str = "Points", line: float = 20.5, team: str = "BOS") -> PropRecord:
    return PropRecord(player=player, stat=stat, line=line, team=team, league="NBA")


def _assert_pdf(content: bytes) -> None:
    assert content.startswith(b"%PDF-")
    assert content.rstrip().endswith(b"%%EOF")


def test_render_empty_list_has_title_and_header_only():
    content = render_props_pdf("nba", [], compress=False)

    _assert_pdf(content)
    assert b"PrizePicks Props" in content
    for header in (b"(Player)", b"(Stat)", b"(Line)", b"(Team)"):
        assert header in content
    assert b"(BOS)" not in content


def test_render_rows_in_input_order():
    records = [
        _record("Zed Last", line=30.5),
        _record("Alpha First", stat="Rebounds", line=7.5, team="MIA"),
    ]

    content = render_props_pdf("nba", records, compress=False)

    _assert_pdf(content)
    header = content.index(b"(Player)")
    first = content.index(b"(Zed Last)")
    second = content.index(b"(Alpha First)")
    assert header < first < second
    assert b"(30.5)" in content
    assert b"(Rebounds)" in content
    assert b"(MIA)" in content


def test_render_uses_bold_header_font():
    content = render_props_pdf("mlb", [_record("Some Player")], compress=False)

    assert b"/Helvetica-Bold" in content
    assert b"/Helvetica " in content


def test_render_flows_onto_multiple_pages():
    records = [_record(f"Player {idx:03d}") for idx in range(120)]

    content = render_props_pdf("nba", records, compress=False)

    _assert_pdf(content)
    page_counts = [int(count) for count in re.findall(rb"/Count (\d+)", content)]
    assert max(page_counts) >= 2
    assert content.index(b"(Player 000)") < content.index(b"(Player 119)")


def test_render_compressed_output_is_valid_pdf():
    content = render_props_pdf("nhl", [_record("Skater", stat="Shots", line=3.5, team="TOR")])

    _assert_pdf(content)


def test_render_failure_is_wrapped(monkeypatch):
    def explode(records):
        raise ValueError("bad cell")

    monkeypatch.setattr(pdf_export, "_table_rows", explode)

    with pytest.raises(RenderFailed, match="bad cell"):
        render_props_pdf("nba", [_record("Anyone")])


def test_props_title_uppercases_league():
    assert pdf_export.props_title("nfl") == "PrizePicks Props – NFL"


def test_render_wraps_long_cells_inside_column():
    name = "Alexander " * 6 + "Finalword"

    content = render_props_pdf("nba", [_record(name, stat=5, line=8, team=123)], compress=False)

    _assert_pdf(content)
    assert name.encode() not in content
    assert b"Finalword" in content
    assert b"(5)" in content
    assert b"(123)" in content
