"""Split a player pool into two skill-balanced teams."""

from teambalancer.balancer import generate_balanced_teams, suggest_team_improvements
from teambalancer.config import TeamGenerationOptions
from teambalancer.models import PlayerRecord, Team, TeamBalanceResult

__all__ = [
    "PlayerRecord",
    "Team",
    "TeamBalanceResult",
    "TeamGenerationOptions",
    "generate_balanced_teams",
    "suggest_team_improvements",
]
