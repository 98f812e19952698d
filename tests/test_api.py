import pytest
from httpx import ASGITransport, AsyncClient

from teambalancer.api import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _players() -> list[dict]:
    return [
        {"player_id": "1", "name": "Ana", "category": 1, "multiplier": 1.0, "position": "forward"},
        {"player_id": "2", "name": "Ben", "category": 1, "multiplier": 1.1, "position": "defender"},
        {"player_id": "3", "name": "Cai", "category": 2, "multiplier": 1.5, "position": "H/P"},
        {"player_id": "4", "name": "Dan", "category": 2, "multiplier": 1.7, "position": "forward"},
        {"player_id": "5", "name": "Fay", "category": 1, "multiplier": 1.2, "position": "MV"},
        {"player_id": "6", "name": "Gus", "category": 3, "multiplier": 2.0, "position": "forward", "is_active": False},
    ]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_balance_teams_endpoint(client: AsyncClient):
    payload = {"players": _players(), "team_a_name": "Reds", "team_b_name": "Blues", "seed": 11}
    resp = await client.post("/teams", json=payload)
    assert resp.status_code == 200

    body = resp.json()
    assert [team["name"] for team in body["teams"]] == ["Reds", "Blues"]
    assigned = [player["player_id"] for team in body["teams"] for player in team["players"]]
    assert sorted(assigned) == ["1", "2", "3", "4", "5"]
    assert body["unused_players"] == []
    assert 0 <= body["balance_score"] <= 100
    keepers = [pid for team in body["teams"] for pid in team["goalkeeper_ids"]]
    assert keepers == ["5"]


@pytest.mark.anyio
async def test_balance_teams_is_reproducible_with_seed(client: AsyncClient):
    payload = {"players": _players(), "seed": 3, "options": {"distribution_method": "position"}}
    first = (await client.post("/teams", json=payload)).json()
    second = (await client.post("/teams", json=payload)).json()

    assert first["teams"] == second["teams"]


@pytest.mark.anyio
async def test_balance_teams_empty_roster(client: AsyncClient):
    resp = await client.post("/teams", json={"players": []})
    assert resp.status_code == 200

    body = resp.json()
    assert len(body["teams"]) == 2
    assert body["balance_score"] == 0
    assert body["warnings"] == ["No active players available"]


@pytest.mark.anyio
async def test_balance_teams_rejects_unknown_position(client: AsyncClient):
    players = _players()
    players[0]["position"] = "libero"
    resp = await client.post("/teams", json={"players": players})
    assert resp.status_code == 422
