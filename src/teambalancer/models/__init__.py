"""Domain models for players, teams and balancing results."""

from .player import (
    DEFENDER,
    FIELD_POSITIONS,
    FORWARD,
    GOALKEEPER,
    HYBRID,
    PlayerRecord,
    Team,
    TeamBalanceResult,
    normalize_position,
)

__all__ = [
    "DEFENDER",
    "FIELD_POSITIONS",
    "FORWARD",
    "GOALKEEPER",
    "HYBRID",
    "PlayerRecord",
    "Team",
    "TeamBalanceResult",
    "normalize_position",
]
