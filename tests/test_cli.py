import csv
import json
from pathlib import Path

import pytest

from teambalancer.cli import main


def _write_roster(path: Path) -> None:
    path.write_text(
        "id,name,category,multiplier,position,active\n"
        "1,Ana,1,1.0,forward,yes\n"
        "2,Ben,1,1.1,defender,yes\n"
        "3,Cai,2,1.5,forward/defender,yes\n"
        "4,Dan,2,1.6,forward,yes\n"
        "5,Eli,3,2.0,defender,no\n"
        "6,Fay,1,1.2,goalkeeper,yes\n",
        encoding="utf-8",
    )


def test_cli_writes_teams_and_report(tmp_path: Path, capsys):
    roster = tmp_path / "roster.csv"
    output = tmp_path / "teams.csv"
    report = tmp_path / "report.json"
    _write_roster(roster)

    main([str(roster), "--seed", "7", "--output", str(output), "--report", str(report), "--team-a", "Reds"])

    with output.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    assert {row["team_name"] for row in rows} <= {"Reds", "Team B"}

    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["unused_players"] == []
    assert 0 <= payload["balance_score"] <= 100
    assert sum(len(team["players"]) for team in payload["teams"]) == 5
    assert "Balance score:" in capsys.readouterr().out


def test_cli_saves_and_loads_profile(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text("Id,Name,Tier,Skill,Pos\n1,Ana,1,1.0,H\n2,Ben,1,1.2,P\n", encoding="utf-8")
    profile = tmp_path / "profile.json"

    main([
        str(roster),
        "--column", "player_id=Id",
        "--column", "name=Name",
        "--column", "category=Tier",
        "--column", "multiplier=Skill",
        "--column", "position=Pos",
        "--team-b", "Blues",
        "--save-profile", str(profile),
        "--output", str(tmp_path / "first.csv"),
    ])
    saved = json.loads(profile.read_text(encoding="utf-8"))
    assert saved["roster_mapping"]["multiplier"] == "Skill"
    assert saved["team_names"]["b"] == "Blues"

    second = tmp_path / "second.csv"
    main([str(roster), "--load-profile", str(profile), "--output", str(second)])
    with second.open(newline="", encoding="utf-8") as f:
        names = {row["team_name"] for row in csv.DictReader(f)}
    assert "Blues" in names


def test_cli_rejects_bad_roster(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text("id,name,category,multiplier,position\n1,Ana,one,1.0,forward\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="row 2"):
        main([str(roster), "--output", str(tmp_path / "out.csv")])


def test_cli_rejects_infinite_category(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text("id,name,category,multiplier,position\n1,Ana,inf,1.0,forward\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="row 2"):
        main([str(roster), "--output", str(tmp_path / "out.csv")])
