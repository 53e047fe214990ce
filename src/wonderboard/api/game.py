# src/wonderboard/api/game.py

"""API endpoints for recording and browsing games."""

from fastapi import APIRouter, Depends, status

from wonderboard.api.deps import get_repository
from wonderboard.repository import Repository
from wonderboard.schemas import game as game_schema
from wonderboard.schemas.stats import GameHistory
from wonderboard.services import game_service, stats_service

# Creates an APIRouter instance
# - prefix="/games": All routes defined here will be prefixed with /games
# - tags=["Games"]: Groups these endpoints under "Games" in the API docs
router = APIRouter(prefix="/games", tags=["Games"])


@router.get("", response_model=list[game_schema.GameRead])
async def read_games(
    repo: Repository = Depends(get_repository),
) -> list[game_schema.GameRead]:
    """
    Retrieve every game with its participants, oldest first.
    """
    return await repo.list_games()


@router.post(
    "",
    response_model=game_schema.GameRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_game(
    game_in: game_schema.GameCreate,
    repo: Repository = Depends(get_repository),
) -> game_schema.GameRead:
    """
    Record a finished game.

    - **players**: 3-7 entries of `{playerId, wonderName, score}` with
      distinct players, distinct wonders and scores from 0 to 200.

    Raises:
        400 Bad Request: If validation fails or a player doesn't exist.
    """
    return await game_service.record_game(repo, game_in)


# Declared before "/{game_id}" so "history" is not taken for an ID
@router.get("/history", response_model=list[GameHistory])
async def read_game_history(
    repo: Repository = Depends(get_repository),
) -> list[GameHistory]:
    """
    Retrieve all games newest first, participants ranked by score.

    Each participant carries a 1-based `position`; on tied scores the
    participant listed first in the game places higher.
    """
    return await stats_service.game_history(repo)


@router.get("/{game_id}", response_model=game_schema.GameRead)
async def read_game(
    game_id: str, repo: Repository = Depends(get_repository)
) -> game_schema.GameRead:
    """
    Retrieve a single game by its ID.
    """
    return await game_service.get_game(repo, game_id)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str, repo: Repository = Depends(get_repository)) -> None:
    """
    Delete a game by its ID, together with its participants.
    """
    await game_service.delete_game(repo, game_id)
    return None
