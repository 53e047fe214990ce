# src/wonderboard/repository/json_file.py

"""Repository that keeps every record in one JSON document.

The document holds a player list and a game list, each game embedding its
participants. It is loaded once and rewritten after every mutation. Without
a path the repository lives purely in memory, which is what the tests use.
"""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from wonderboard.exceptions import PlayerHasGamesError, StorageError
from wonderboard.schemas.common import CamelModel
from wonderboard.schemas.game import (
    GameParticipantCreate,
    GameParticipantRead,
    GameRead,
)
from wonderboard.schemas.player import PlayerRead

logger = logging.getLogger(__name__)


class StoreDocument(CamelModel):
    """On-disk layout of the file backend."""

    players: list[PlayerRead] = Field(default_factory=list)
    games: list[GameRead] = Field(default_factory=list)


class JsonFileRepository:
    """Single-document store shared by all requests of the process."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._data = StoreDocument()

    def load(self) -> None:
        """Read the document from disk. A missing file means an empty store."""
        if self.path is None or not self.path.exists():
            self._data = StoreDocument()
            return

        try:
            self._data = StoreDocument.model_validate_json(
                self.path.read_text(encoding="utf-8")
            )
        except (OSError, PydanticValidationError) as e:
            logger.error(
                "Failed to load data file",
                extra={"path": str(self.path), "error": str(e)},
                exc_info=True,
            )
            raise StorageError(
                "Failed to load data file", details={"path": str(self.path)}
            ) from e

        logger.info(
            "Loaded data file",
            extra={
                "path": str(self.path),
                "player_count": len(self._data.players),
                "game_count": len(self._data.games),
            },
        )

    def _write(self) -> None:
        if self.path is None:
            return

        # Write to a sibling file first so a crash never truncates the document
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_text(
                self._data.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
            )
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(
                "Failed to write data file",
                extra={"path": str(self.path), "error": str(e)},
                exc_info=True,
            )
            raise StorageError(
                "Failed to save data", details={"path": str(self.path)}
            ) from e

    # -------------------------------------------------------------------------
    # Players
    # -------------------------------------------------------------------------

    async def list_players(self) -> list[PlayerRead]:
        return list(self._data.players)

    async def get_player(self, player_id: str) -> PlayerRead | None:
        return next(
            (p for p in self._data.players if str(p.id) == str(player_id)), None
        )

    async def create_player(self, name: str) -> PlayerRead:
        player = PlayerRead(
            id=uuid.uuid4(), name=name, created_at=datetime.now(timezone.utc)
        )
        self._data.players.append(player)
        try:
            self._write()
        except StorageError:
            self._data.players.remove(player)
            raise
        return player

    async def delete_player(self, player_id: str) -> bool:
        player = await self.get_player(player_id)
        if player is None:
            return False

        if any(
            p.player_id == player.id for game in self._data.games for p in game.players
        ):
            raise PlayerHasGamesError(player.id)

        index = self._data.players.index(player)
        del self._data.players[index]
        try:
            self._write()
        except StorageError:
            self._data.players.insert(index, player)
            raise
        return True

    # -------------------------------------------------------------------------
    # Games
    # -------------------------------------------------------------------------

    async def list_games(self) -> list[GameRead]:
        return list(self._data.games)

    async def get_game(self, game_id: str) -> GameRead | None:
        return next((g for g in self._data.games if str(g.id) == str(game_id)), None)

    async def create_game(
        self, participants: Sequence[GameParticipantCreate]
    ) -> GameRead:
        game = GameRead(
            id=uuid.uuid4(),
            created_at=datetime.now(timezone.utc),
            players=[
                GameParticipantRead(
                    player_id=p.player_id, wonder_name=p.wonder_name, score=p.score
                )
                for p in participants
            ],
        )
        self._data.games.append(game)
        try:
            self._write()
        except StorageError:
            # Compensate so the in-memory state matches what is on disk
            self._data.games.remove(game)
            logger.error("Rolled back unsaved game", extra={"game_id": str(game.id)})
            raise
        return game

    async def delete_game(self, game_id: str) -> bool:
        game = await self.get_game(game_id)
        if game is None:
            return False

        index = self._data.games.index(game)
        del self._data.games[index]
        try:
            self._write()
        except StorageError:
            self._data.games.insert(index, game)
            raise
        return True
