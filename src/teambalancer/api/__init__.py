"""REST API for the team balancer."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from teambalancer.api.schemas import BalanceRequest, BalanceResponse
from teambalancer.balancer import generate_balanced_teams
from teambalancer.config import default_options, default_team_names


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="teambalancer")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/teams", response_model=BalanceResponse)
    async def balance_teams(request: BalanceRequest) -> BalanceResponse:
        env_team_a, env_team_b = default_team_names()
        try:
            options = request.options.to_options() if request.options else default_options()
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        result = generate_balanced_teams(
            request.players,
            options,
            request.team_a_name or env_team_a,
            request.team_b_name or env_team_b,
            seed=request.seed,
        )
        logger.info(
            "Balanced %d players into teams of %s (score %d)",
            len(request.players),
            "/".join(str(len(team.players)) for team in result.teams),
            result.balance_score,
        )
        return BalanceResponse.from_result(result)

    return app


__all__ = ["create_app"]
