# src/wonderboard/repository/base.py

"""The storage capability consumed by services and routes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from wonderboard.schemas.game import GameParticipantCreate, GameRead
from wonderboard.schemas.player import PlayerRead


@runtime_checkable
class Repository(Protocol):
    """Flat record store for players and games.

    Implementations own their atomicity: ``create_game`` either stores the
    game with all of its participants or stores nothing. They also enforce
    the referential rule that a player who appears in any game cannot be
    deleted.
    """

    async def list_players(self) -> list[PlayerRead]:
        """Return all players, oldest first."""
        ...

    async def get_player(self, player_id: str) -> PlayerRead | None: ...

    async def create_player(self, name: str) -> PlayerRead:
        """Store a new player. Name uniqueness is checked by the caller."""
        ...

    async def delete_player(self, player_id: str) -> bool:
        """
        Delete a player.

        Returns:
            False if no player has this ID.

        Raises:
            PlayerHasGamesError: If the player appears in any game.
        """
        ...

    async def list_games(self) -> list[GameRead]:
        """Return all games with participants in submission order, oldest first."""
        ...

    async def get_game(self, game_id: str) -> GameRead | None: ...

    async def create_game(
        self, participants: Sequence[GameParticipantCreate]
    ) -> GameRead:
        """
        Store a game together with its participants.

        Raises:
            StorageError: If the write fails. Nothing is left behind.
        """
        ...

    async def delete_game(self, game_id: str) -> bool:
        """Delete a game and its participants. False if no game has this ID."""
        ...
