from pathlib import Path

import pytest

from teambalancer.ingest import RosterRow, load_records_from_csv, rows_to_records
from teambalancer.models import GOALKEEPER


def _row(**kwargs):
    mapping = {
        "player_id": "id",
        "name": "name",
        "category": "category",
        "multiplier": "multiplier",
        "position": "position",
        "is_active": "active",
        "points": "points",
    }
    return RosterRow.from_mapping(kwargs, mapping)


def test_rows_to_records_parses_values():
    rows = [
        _row(id="p1", name="Keeper", category="1", multiplier="1,25", position="MV", active="yes"),
        _row(id="p2", name="Winger", category="2", multiplier="1.6", position="H", active="0", points="140"),
    ]

    records = rows_to_records(rows)
    assert records[0].position == GOALKEEPER
    assert records[0].multiplier == pytest.approx(1.25)
    assert records[1].is_active is False
    assert records[1].points == pytest.approx(140.0)


def test_rows_to_records_missing_active_defaults_true():
    records = rows_to_records([_row(id="p1", name="Player", category="3", multiplier="2.0", position="defender")])
    assert records[0].is_active is True
    assert records[0].points is None


def test_rows_to_records_reports_bad_row():
    rows = [_row(id="p1", name="Bad", category="top", multiplier="1.0", position="forward")]

    with pytest.raises(ValueError, match="row 2"):
        rows_to_records(rows)


def test_rows_to_records_rejects_unknown_position():
    with pytest.raises(ValueError, match="p7"):
        rows_to_records([_row(id="p7", name="Odd", category="1", multiplier="1.0", position="libero")])


def test_load_records_from_csv_with_joined_name(tmp_path: Path):
    path = tmp_path / "roster.csv"
    path.write_text(
        "Player,First,Last,Tier,Skill,Role\n"
        "1,Ana,Aho,1,1.0,forward\n"
        "2,Ben,Berg,2,1.5,goalkeeper\n",
        encoding="utf-8",
    )
    mapping = {
        "player_id": "Player",
        "name": "First|Last",
        "category": "Tier",
        "multiplier": "Skill",
        "position": "Role",
    }

    records = load_records_from_csv(path, mapping=mapping)
    assert [record.name for record in records] == ["Ana Aho", "Ben Berg"]
    assert records[1].is_goalkeeper


@pytest.mark.parametrize("raw_category", ["inf", "-inf", "nan", "1.7"])
def test_rows_to_records_rejects_non_whole_categories(raw_category):
    rows = [_row(id="p3", name="Edge", category=raw_category, multiplier="1.0", position="forward")]

    with pytest.raises(ValueError, match="row 2"):
        rows_to_records(rows)


def test_rows_to_records_accepts_integral_and_zero_categories():
    rows = [
        _row(id="p1", name="Whole", category="2.0", multiplier="1.0", position="forward"),
        _row(id="p2", name="Zero", category="0", multiplier="0.9", position="defender"),
    ]

    records = rows_to_records(rows)
    assert [record.category for record in records] == [2, 0]
