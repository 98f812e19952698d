"""Command-line interface for splitting a roster CSV into two balanced teams."""

from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Sequence

from teambalancer.balancer import generate_balanced_teams
from teambalancer.config import (
    BALANCE_METHODS,
    DISTRIBUTION_METHODS,
    TeamGenerationOptions,
    default_options,
    default_team_names,
)
from teambalancer.config_loader import MappingProfile
from teambalancer.ingest import load_records_from_csv
from teambalancer.models import TeamBalanceResult


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split a roster into two balanced teams")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--team-a", default=None, help="Display name for the first team")
    parser.add_argument("--team-b", default=None, help="Display name for the second team")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible shuffles")
    parser.add_argument(
        "--distribution",
        choices=DISTRIBUTION_METHODS,
        default=None,
        help="Distribution strategy for field players",
    )
    parser.add_argument(
        "--balance-method",
        choices=BALANCE_METHODS,
        default="points",
        help="Balance method recorded with the run",
    )
    parser.add_argument(
        "--players-per-team",
        type=int,
        default=None,
        help="Expected players per team (only checked with --strict)",
    )
    parser.add_argument(
        "--goalkeepers-per-team",
        type=int,
        default=None,
        help="Expected goalkeepers per team (only checked with --strict)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Warn when a team comes up short of the expected player counts",
    )
    parser.add_argument("--output", type=Path, default=Path("teams.csv"), help="Output CSV path")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write the full result as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Log each assignment")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def result_to_payload(result: TeamBalanceResult) -> dict:
    return {
        "balance_score": result.balance_score,
        "warnings": list(result.warnings),
        "suggestions": list(result.suggestions),
        "unused_players": [player.player_id for player in result.unused_players],
        "teams": [
            {
                "id": team.team_id,
                "name": team.name,
                "total_points": team.total_points,
                "average_multiplier": team.average_multiplier(),
                "players": [player.player_id for player in team.players],
                "field_players": [player.player_id for player in team.field_players],
                "goalkeepers": [player.player_id for player in team.goalkeepers],
                "assigned_roles": dict(team.assigned_roles),
            }
            for team in result.teams
        ],
    }


def _write_teams_csv(path: Path, result: TeamBalanceResult) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["team_id", "team_name", "player_id", "name", "position", "category", "multiplier", "points", "role"])
        for team in result.teams:
            for player in team.players:
                writer.writerow([
                    team.team_id,
                    team.name,
                    player.player_id,
                    player.name,
                    player.position,
                    player.category,
                    player.multiplier,
                    player.effective_points,
                    team.assigned_roles.get(player.player_id, ""),
                ])


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    roster_mapping = _parse_mapping(args.column)
    profile = MappingProfile(roster_mapping={})
    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        roster_mapping = profile.roster_mapping | roster_mapping

    env_team_a, env_team_b = default_team_names()
    team_a_name = args.team_a or profile.team_name("a", env_team_a)
    team_b_name = args.team_b or profile.team_name("b", env_team_b)

    if args.save_profile:
        MappingProfile(roster_mapping, {"a": team_a_name, "b": team_b_name}).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    try:
        records = load_records_from_csv(args.roster, mapping=roster_mapping or None)
    except ValueError as exc:
        raise SystemExit(f"Could not read roster: {exc}") from exc

    defaults = default_options()
    options = TeamGenerationOptions(
        players_per_team=args.players_per_team,
        goalkeepers_per_team=(
            args.goalkeepers_per_team
            if args.goalkeepers_per_team is not None
            else defaults.goalkeepers_per_team
        ),
        balance_method=args.balance_method,
        allow_partial_teams=not args.strict,
        distribution_method=args.distribution or defaults.distribution_method,
    )

    result = generate_balanced_teams(
        records,
        options,
        team_a_name,
        team_b_name,
        seed=args.seed,
    )

    _write_teams_csv(args.output, result)
    print(f"Wrote {sum(len(team.players) for team in result.teams)} assignments to {args.output}")
    for team in result.teams:
        print(
            f"{team.name}: {len(team.field_players)} field, {len(team.goalkeepers)} goalkeepers, "
            f"{team.total_points:.1f} points"
        )
    print(f"Balance score: {result.balance_score}")
    for warning in result.warnings:
        print(f"Warning: {warning}")
    for suggestion in result.suggestions:
        print(f"Suggestion: {suggestion}")

    if args.report:
        args.report.write_text(json.dumps(result_to_payload(result), indent=2), encoding="utf-8")
        print(f"Wrote balance report to {args.report}")


if __name__ == "__main__":
    main()
