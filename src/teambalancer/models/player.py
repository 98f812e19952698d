"""Canonical player and team models shared across ingest, engine and API layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict


FORWARD = "forward"
DEFENDER = "defender"
HYBRID = "forward/defender"
GOALKEEPER = "goalkeeper"

FIELD_POSITIONS = frozenset({FORWARD, DEFENDER, HYBRID})

_POSITION_ALIASES: Dict[str, str] = {
    "FORWARD": FORWARD,
    "F": FORWARD,
    "H": FORWARD,
    "DEFENDER": DEFENDER,
    "D": DEFENDER,
    "P": DEFENDER,
    "FORWARD/DEFENDER": HYBRID,
    "F/D": HYBRID,
    "H/P": HYBRID,
    "GOALKEEPER": GOALKEEPER,
    "GOALIE": GOALKEEPER,
    "G": GOALKEEPER,
    "GK": GOALKEEPER,
    "MV": GOALKEEPER,
}


def normalize_position(value: str) -> str:
    """Map a raw position marker onto one of the canonical position names."""

    token = "/".join(part.strip() for part in value.strip().upper().split("/"))
    if token not in _POSITION_ALIASES:
        raise ValueError(f"unknown position {value!r}")
    return _POSITION_ALIASES[token]


class PlayerRecord(BaseModel):
    """Normalized roster entry consumed by the balancing engine."""

    player_id: str = Field(..., min_length=1)
    name: str = ""
    category: int
    multiplier: float = Field(..., ge=0.0)
    position: str
    is_active: bool = True
    points: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("position", mode="before")
    @classmethod
    def _canonical_position(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError("position must be a string")
        return normalize_position(value)

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name") and data.get("player_id"):
            data = {**data, "name": data["player_id"]}
        return data

    @property
    def is_goalkeeper(self) -> bool:
        return self.position == GOALKEEPER

    @property
    def effective_points(self) -> float:
        if self.points is not None:
            return self.points
        return self.multiplier * 100


@dataclass
class Team:
    """Mutable accumulator for one side of a balancing run."""

    team_id: str
    name: str
    players: List[PlayerRecord] = field(default_factory=list)
    field_players: List[PlayerRecord] = field(default_factory=list)
    goalkeepers: List[PlayerRecord] = field(default_factory=list)
    members: List[str] = field(default_factory=list)
    assigned_roles: Dict[str, str] = field(default_factory=dict)
    total_points: float = 0.0

    def average_multiplier(self) -> float:
        """Mean multiplier of assigned players; 0.0 for an empty team."""

        if not self.players:
            return 0.0
        return sum(player.multiplier for player in self.players) / len(self.players)

    def multiplier_sum(self) -> float:
        return sum(player.multiplier for player in self.players)

    def add_field_player(self, player: PlayerRecord, role: Optional[str] = None) -> None:
        self.players.append(player)
        self.field_players.append(player)
        self.members.append(player.player_id)
        if role is not None:
            self.assigned_roles[player.player_id] = role

    def add_goalkeeper(self, player: PlayerRecord) -> None:
        self.players.append(player)
        self.goalkeepers.append(player)
        self.members.append(player.player_id)

    def recompute_total_points(self) -> float:
        self.total_points = sum(player.effective_points for player in self.players)
        return self.total_points


@dataclass
class TeamBalanceResult:
    """Output of a single balancing run."""

    teams: List[Team]
    balance_score: int
    unused_players: List[PlayerRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
