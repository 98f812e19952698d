from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from teambalancer.config import TeamGenerationOptions
from teambalancer.models import PlayerRecord


class OptionsPayload(BaseModel):
    players_per_team: int | None = Field(default=None, ge=0)
    goalkeepers_per_team: int = Field(default=1, ge=0)
    balance_method: Literal["skillLevel", "points", "hybrid"] = "points"
    allow_partial_teams: bool = True
    distribution_method: Literal["skill", "position"] = "skill"

    def to_options(self) -> TeamGenerationOptions:
        return TeamGenerationOptions(
            players_per_team=self.players_per_team,
            goalkeepers_per_team=self.goalkeepers_per_team,
            balance_method=self.balance_method,
            allow_partial_teams=self.allow_partial_teams,
            distribution_method=self.distribution_method,
        )


class BalanceRequest(BaseModel):
    players: List[PlayerRecord] = Field(default_factory=list)
    options: OptionsPayload | None = None
    team_a_name: str | None = Field(default=None, min_length=1)
    team_b_name: str | None = Field(default=None, min_length=1)
    seed: int | None = None
