"""Pydantic models for API I/O."""

from .request import BalanceRequest, OptionsPayload
from .result import BalanceResponse, TeamResponse

__all__ = [
    "BalanceRequest",
    "BalanceResponse",
    "OptionsPayload",
    "TeamResponse",
]
