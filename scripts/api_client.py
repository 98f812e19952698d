"""Lightweight REST client for the teambalancer API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx

from teambalancer.ingest import load_records_from_csv


def build_mapping(raw: str) -> dict[str, str]:
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the teambalancer REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV")
    parser.add_argument("--roster-mapping", default="", help="JSON mapping for roster columns")
    parser.add_argument("--team-a", default=None, help="Display name for the first team")
    parser.add_argument("--team-b", default=None, help="Display name for the second team")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible shuffles")
    parser.add_argument("--distribution", choices=["skill", "position"], default="skill")
    parser.add_argument("--health", action="store_true", help="Check API health and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.health:
            resp = client.get("/health")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            raise SystemExit("roster file is required unless using --health")

        try:
            records = load_records_from_csv(args.roster, mapping=build_mapping(args.roster_mapping) or None)
        except ValueError as exc:
            raise SystemExit(f"Could not read roster: {exc}") from exc

        payload = {
            "players": [record.model_dump() for record in records],
            "options": {"distribution_method": args.distribution},
            "team_a_name": args.team_a,
            "team_b_name": args.team_b,
            "seed": args.seed,
        }
        resp = client.post("/teams", json=payload)
        resp.raise_for_status()
        result = resp.json()

        print(f"Balance score: {result['balance_score']}")
        for team in result["teams"]:
            names = ", ".join(player["name"] for player in team["players"])
            print(f"{team['name']} ({team['total_points']:.1f} pts): {names}")
        for warning in result["warnings"]:
            print(f"Warning: {warning}")


if __name__ == "__main__":
    main()
