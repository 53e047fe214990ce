# src/wonderboard/services/game_service.py

"""Business logic for game-related operations."""

from __future__ import annotations

import logging

from wonderboard.exceptions import GameNotFoundError, UnknownPlayerError
from wonderboard.repository import Repository
from wonderboard.schemas import game as game_schema

logger = logging.getLogger(__name__)


async def get_game(repo: Repository, game_id: str) -> game_schema.GameRead:
    """
    Fetch a single game with its participants.

    Raises:
        GameNotFoundError: If no game has this ID.
    """
    game = await repo.get_game(game_id)
    if game is None:
        raise GameNotFoundError(game_id)
    return game


async def _validate_players_exist(
    repo: Repository, participants: list[game_schema.GameParticipantCreate]
) -> None:
    """
    Check every participant against the stored players.

    Shape rules (participant count, distinct wonders and players, score
    range) are already enforced by the request schema.

    Raises:
        UnknownPlayerError: For the first participant whose player is unknown.
    """
    known_ids = {p.id for p in await repo.list_players()}
    for participant in participants:
        if participant.player_id not in known_ids:
            raise UnknownPlayerError(str(participant.player_id))


async def record_game(
    repo: Repository, game_in: game_schema.GameCreate
) -> game_schema.GameRead:
    """
    Record a finished game.

    Raises:
        UnknownPlayerError: If a participant references a missing player.
        StorageError: If the repository fails to store the game.
    """
    logger.info(
        "Recording new game", extra={"participant_count": len(game_in.players)}
    )

    try:
        await _validate_players_exist(repo, game_in.players)
    except UnknownPlayerError as e:
        logger.warning("Rejected game: %s", e.message, extra=e.details)
        raise

    game = await repo.create_game(game_in.players)
    logger.info("Game recorded successfully", extra={"game_id": str(game.id)})
    return game


async def delete_game(repo: Repository, game_id: str) -> None:
    """
    Delete a game and its participants.

    Raises:
        GameNotFoundError: If no game has this ID.
    """
    if not await repo.delete_game(game_id):
        raise GameNotFoundError(game_id)
    logger.info("Deleted game", extra={"game_id": game_id})
