# src/wonderboard/services/player_service.py

"""Business logic for player-related operations."""

from __future__ import annotations

import logging

from wonderboard.exceptions import DuplicatePlayerNameError, PlayerNotFoundError
from wonderboard.repository import Repository
from wonderboard.schemas import player as player_schema

logger = logging.getLogger(__name__)


async def get_player(repo: Repository, player_id: str) -> player_schema.PlayerRead:
    """
    Fetch a single player.

    Raises:
        PlayerNotFoundError: If no player has this ID.
    """
    player = await repo.get_player(player_id)
    if player is None:
        raise PlayerNotFoundError(player_id)
    return player


async def create_player(
    repo: Repository, player_in: player_schema.PlayerCreate
) -> player_schema.PlayerRead:
    """
    Register a new player.

    Names are unique regardless of case: "Ann" blocks "ann" and "ANN".

    Raises:
        DuplicatePlayerNameError: If the name is already taken.
    """
    wanted = player_in.name.lower()
    existing = await repo.list_players()
    if any(p.name.lower() == wanted for p in existing):
        logger.warning(
            "Rejected duplicate player name", extra={"player_name": player_in.name}
        )
        raise DuplicatePlayerNameError(player_in.name)

    player = await repo.create_player(player_in.name)
    logger.info(
        "Created player",
        extra={"player_id": str(player.id), "player_name": player.name},
    )
    return player


async def delete_player(repo: Repository, player_id: str) -> None:
    """
    Delete a player who has not played any games.

    Raises:
        PlayerNotFoundError: If no player has this ID.
        PlayerHasGamesError: If the player appears in a recorded game.
    """
    if not await repo.delete_player(player_id):
        raise PlayerNotFoundError(player_id)
    logger.info("Deleted player", extra={"player_id": player_id})
