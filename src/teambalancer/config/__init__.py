"""Configuration helpers for balancing options."""

from .options import (
    BALANCE_METHODS,
    DISTRIBUTION_METHODS,
    TeamGenerationOptions,
    default_options,
    default_team_names,
)

__all__ = [
    "BALANCE_METHODS",
    "DISTRIBUTION_METHODS",
    "TeamGenerationOptions",
    "default_options",
    "default_team_names",
]
