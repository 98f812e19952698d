"""Team generation options and environment-driven defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, get_args


logger = logging.getLogger(__name__)

BalanceMethod = Literal["skillLevel", "points", "hybrid"]
DistributionMethod = Literal["skill", "position"]

BALANCE_METHODS: Tuple[str, ...] = get_args(BalanceMethod)
DISTRIBUTION_METHODS: Tuple[str, ...] = get_args(DistributionMethod)

DEFAULT_TEAM_A_NAME = "Team A"
DEFAULT_TEAM_B_NAME = "Team B"

_TEAM_A_NAME_ENV = "TEAMBALANCER_TEAM_A_NAME"
_TEAM_B_NAME_ENV = "TEAMBALANCER_TEAM_B_NAME"
_DISTRIBUTION_ENV = "TEAMBALANCER_DISTRIBUTION"
_GOALKEEPERS_PER_TEAM_ENV = "TEAMBALANCER_GOALKEEPERS_PER_TEAM"

_GOALKEEPERS_PER_TEAM_DEFAULT = 1


@dataclass(frozen=True)
class TeamGenerationOptions:
    """Caller-supplied knobs for a balancing run.

    ``players_per_team`` and ``goalkeepers_per_team`` never cap assignment;
    with ``allow_partial_teams`` disabled they only raise advisory warnings
    for teams that come up short. ``balance_method`` is carried through for
    reporting and does not change the algorithm.
    """

    players_per_team: Optional[int] = None
    goalkeepers_per_team: int = _GOALKEEPERS_PER_TEAM_DEFAULT
    balance_method: BalanceMethod = "points"
    allow_partial_teams: bool = True
    distribution_method: DistributionMethod = "skill"

    def __post_init__(self) -> None:
        if self.balance_method not in BALANCE_METHODS:
            raise ValueError(
                f"balance_method must be one of {', '.join(BALANCE_METHODS)}, got {self.balance_method!r}"
            )
        if self.distribution_method not in DISTRIBUTION_METHODS:
            raise ValueError(
                f"distribution_method must be one of {', '.join(DISTRIBUTION_METHODS)}, "
                f"got {self.distribution_method!r}"
            )
        if self.players_per_team is not None and self.players_per_team < 0:
            raise ValueError("players_per_team must be non-negative")
        if self.goalkeepers_per_team < 0:
            raise ValueError("goalkeepers_per_team must be non-negative")


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_choice(name: str, default: str, choices: Tuple[str, ...]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("Invalid value for %s: %s; using default %s", name, raw, default)
        return default
    return value


def default_team_names() -> Tuple[str, str]:
    """Return the (team A, team B) display names, honoring env overrides."""

    return (
        _env_str(_TEAM_A_NAME_ENV, DEFAULT_TEAM_A_NAME),
        _env_str(_TEAM_B_NAME_ENV, DEFAULT_TEAM_B_NAME),
    )


def default_options() -> TeamGenerationOptions:
    """Build options from environment overrides, falling back to defaults."""

    return TeamGenerationOptions(
        goalkeepers_per_team=_env_int(
            _GOALKEEPERS_PER_TEAM_ENV, _GOALKEEPERS_PER_TEAM_DEFAULT, min_value=0
        ),
        distribution_method=_env_choice(_DISTRIBUTION_ENV, "skill", DISTRIBUTION_METHODS),  # type: ignore[arg-type]
    )
