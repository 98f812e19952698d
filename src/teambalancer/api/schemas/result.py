from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel

from teambalancer.models import PlayerRecord, Team, TeamBalanceResult


class TeamResponse(BaseModel):
    team_id: str
    name: str
    total_points: float
    average_multiplier: float
    players: List[PlayerRecord]
    field_player_ids: List[str]
    goalkeeper_ids: List[str]
    assigned_roles: Dict[str, str]

    @classmethod
    def from_team(cls, team: Team) -> "TeamResponse":
        return cls(
            team_id=team.team_id,
            name=team.name,
            total_points=team.total_points,
            average_multiplier=team.average_multiplier(),
            players=list(team.players),
            field_player_ids=[player.player_id for player in team.field_players],
            goalkeeper_ids=[player.player_id for player in team.goalkeepers],
            assigned_roles=dict(team.assigned_roles),
        )


class BalanceResponse(BaseModel):
    teams: List[TeamResponse]
    balance_score: int
    unused_players: List[PlayerRecord]
    warnings: List[str]
    suggestions: List[str]

    @classmethod
    def from_result(cls, result: TeamBalanceResult) -> "BalanceResponse":
        return cls(
            teams=[TeamResponse.from_team(team) for team in result.teams],
            balance_score=result.balance_score,
            unused_players=list(result.unused_players),
            warnings=list(result.warnings),
            suggestions=list(result.suggestions),
        )
