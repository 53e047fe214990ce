# src/wonderboard/api/player.py

"""API endpoints for managing players."""

from fastapi import APIRouter, Depends, status

from wonderboard.api.deps import get_repository
from wonderboard.repository import Repository
from wonderboard.schemas import player as player_schema
from wonderboard.services import player_service

# Create an APIRouter instance for players
# - prefix="/players": All routes here will be prefixed with /players
# - tags=["Players"]: Groups these endpoints under "Players" in the API docs
router = APIRouter(prefix="/players", tags=["Players"])


@router.get("", response_model=list[player_schema.PlayerRead])
async def read_players(
    repo: Repository = Depends(get_repository),
) -> list[player_schema.PlayerRead]:
    """
    Retrieve every player, oldest first.
    """
    return await repo.list_players()


@router.post(
    "",
    response_model=player_schema.PlayerRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_player(
    player_in: player_schema.PlayerCreate,
    repo: Repository = Depends(get_repository),
) -> player_schema.PlayerRead:
    """
    Create a new player.

    - **name**: 1-50 characters after trimming, unique regardless of case.

    Raises:
        400 Bad Request: If the name is invalid or already taken.
    """
    return await player_service.create_player(repo, player_in)


@router.get("/{player_id}", response_model=player_schema.PlayerRead)
async def read_player(
    player_id: str, repo: Repository = Depends(get_repository)
) -> player_schema.PlayerRead:
    """
    Retrieve a single player by their ID.
    """
    return await player_service.get_player(repo, player_id)


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_player(
    player_id: str, repo: Repository = Depends(get_repository)
) -> None:
    """
    Delete a player by their ID.

    Raises:
        404 Not Found: If the player doesn't exist.
        400 Bad Request: If the player has played games.
    """
    await player_service.delete_player(repo, player_id)
    return None
