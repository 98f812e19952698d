"""Two-team balancing engine."""

from .service import (
    NO_ACTIVE_PLAYERS_WARNING,
    calculate_balance_score,
    distribute_by_category,
    distribute_by_position,
    distribute_goalkeepers,
    generate_balanced_teams,
    partition_by_category,
    suggest_team_improvements,
)

__all__ = [
    "NO_ACTIVE_PLAYERS_WARNING",
    "calculate_balance_score",
    "distribute_by_category",
    "distribute_by_position",
    "distribute_goalkeepers",
    "generate_balanced_teams",
    "partition_by_category",
    "suggest_team_improvements",
]
