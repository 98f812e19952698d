import logging

import pytest

from teambalancer.config import TeamGenerationOptions, default_options, default_team_names


def test_options_defaults():
    options = TeamGenerationOptions()
    assert options.distribution_method == "skill"
    assert options.balance_method == "points"
    assert options.allow_partial_teams is True


def test_options_reject_unknown_methods():
    with pytest.raises(ValueError):
        TeamGenerationOptions(balance_method="elo")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        TeamGenerationOptions(distribution_method="random")  # type: ignore[arg-type]


def test_options_reject_negative_counts():
    with pytest.raises(ValueError):
        TeamGenerationOptions(players_per_team=-1)


def test_default_team_names_honor_env(monkeypatch):
    monkeypatch.setenv("TEAMBALANCER_TEAM_A_NAME", "Whites")
    monkeypatch.delenv("TEAMBALANCER_TEAM_B_NAME", raising=False)
    assert default_team_names() == ("Whites", "Team B")


def test_default_options_env_overrides(monkeypatch):
    monkeypatch.setenv("TEAMBALANCER_DISTRIBUTION", "Position")
    monkeypatch.setenv("TEAMBALANCER_GOALKEEPERS_PER_TEAM", "2")
    options = default_options()
    assert options.distribution_method == "position"
    assert options.goalkeepers_per_team == 2


def test_default_options_invalid_env_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("TEAMBALANCER_DISTRIBUTION", "chaos")
    monkeypatch.setenv("TEAMBALANCER_GOALKEEPERS_PER_TEAM", "two")
    with caplog.at_level(logging.WARNING):
        options = default_options()
    assert options.distribution_method == "skill"
    assert options.goalkeepers_per_team == 1
    assert "TEAMBALANCER_GOALKEEPERS_PER_TEAM" in caplog.text
