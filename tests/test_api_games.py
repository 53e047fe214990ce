# tests/test_api_games.py

"""Tests for the Game API endpoints."""

import pytest
from httpx import AsyncClient

# =============================================================================
# Helper Functions
# =============================================================================


async def create_players(client: AsyncClient, *names: str) -> list[str]:
    """Helper to create players and return their IDs."""
    ids = []
    for name in names:
        res = await client.post("/players", json={"name": name})
        assert res.status_code == 201
        ids.append(res.json()["id"])
    return ids


# =============================================================================
# Game CRUD
# =============================================================================


@pytest.mark.asyncio
async def test_create_game(async_client: AsyncClient):
    """Test recording a game via the POST /games endpoint."""
    # 1. ARRANGE: Three players.
    ann, ben, cat = await create_players(async_client, "Ann", "Ben", "Cat")
    game_payload = {
        "players": [
            {"playerId": ann, "wonderName": "alexandria", "score": 50},
            {"playerId": ben, "wonderName": "gizah", "score": 80},
            {"playerId": cat, "wonderName": "babylon", "score": 80},
        ]
    }

    # 2. ACT: Record the game.
    response = await async_client.post("/games", json=game_payload)

    # 3. ASSERT: Created, with participants echoed in submission order.
    assert response.status_code == 201
    data = response.json()
    assert len(data["id"]) == 36
    assert "createdAt" in data
    assert data["players"] == game_payload["players"]


@pytest.mark.asyncio
async def test_create_game_accepts_snake_case_keys(async_client: AsyncClient):
    """Participants may also be sent with snake_case keys."""
    ann, ben, cat = await create_players(async_client, "Ann", "Ben", "Cat")

    response = await async_client.post(
        "/games",
        json={
            "players": [
                {"player_id": ann, "wonder_name": "olympia", "score": 0},
                {"player_id": ben, "wonder_name": "ephesos", "score": 200},
                {"player_id": cat, "wonder_name": "colossus", "score": 100},
            ]
        },
    )

    assert response.status_code == 201
    assert response.json()["players"][1]["wonderName"] == "ephesos"


@pytest.mark.asyncio
async def test_list_and_read_games(async_client: AsyncClient):
    """Recorded games are listed with nested participants and readable by ID."""
    ids = await create_players(async_client, "Ann", "Ben", "Cat", "Dan")
    wonders = ["alexandria", "babylon", "colossus", "ephesos"]
    payload = {
        "players": [
            {"playerId": pid, "wonderName": w, "score": 10 * i}
            for i, (pid, w) in enumerate(zip(ids, wonders))
        ]
    }
    created = (await async_client.post("/games", json=payload)).json()

    list_response = await async_client.get("/games")
    assert list_response.status_code == 200
    games = list_response.json()
    assert len(games) == 1
    assert games[0]["id"] == created["id"]
    assert len(games[0]["players"]) == 4

    read_response = await async_client.get(f"/games/{created['id']}")
    assert read_response.status_code == 200
    assert read_response.json() == created


@pytest.mark.asyncio
async def test_delete_game(async_client: AsyncClient):
    """Test deleting a game."""
    ann, ben, cat = await create_players(async_client, "Ann", "Ben", "Cat")
    created = await async_client.post(
        "/games",
        json={
            "players": [
                {"playerId": ann, "wonderName": "alexandria", "score": 1},
                {"playerId": ben, "wonderName": "babylon", "score": 2},
                {"playerId": cat, "wonderName": "gizah", "score": 3},
            ]
        },
    )
    game_id = created.json()["id"]

    delete_response = await async_client.delete(f"/games/{game_id}")
    assert delete_response.status_code == 204

    # Verify that the game is gone.
    assert (await async_client.get(f"/games/{game_id}")).status_code == 404
    assert (await async_client.get("/games")).json() == []


# =============================================================================
# Game History
# =============================================================================


@pytest.mark.asyncio
async def test_game_history_ranks_participants(async_client: AsyncClient):
    """
    Tie at the top: B is listed before C with the same score, so B is
    first, C second and A third.
    """
    ann, ben, cat = await create_players(async_client, "A", "B", "C")
    await async_client.post(
        "/games",
        json={
            "players": [
                {"playerId": ann, "wonderName": "alexandria", "score": 50},
                {"playerId": ben, "wonderName": "gizah", "score": 80},
                {"playerId": cat, "wonderName": "babylon", "score": 80},
            ]
        },
    )

    response = await async_client.get("/games/history")

    assert response.status_code == 200
    (game,) = response.json()
    assert [(p["playerName"], p["position"]) for p in game["players"]] == [
        ("B", 1),
        ("C", 2),
        ("A", 3),
    ]
    assert game["players"][0]["wonderDisplayName"] == "The Great Pyramid of Giza"


@pytest.mark.asyncio
async def test_game_history_empty(async_client: AsyncClient):
    response = await async_client.get("/games/history")

    assert response.status_code == 200
    assert response.json() == []
