# src/wonderboard/repository/sql.py

"""Repository backed by a relational database through async SQLAlchemy."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from wonderboard.db import models
from wonderboard.exceptions import (
    DuplicatePlayerNameError,
    PlayerHasGamesError,
    StorageError,
)
from wonderboard.schemas.game import (
    GameParticipantCreate,
    GameParticipantRead,
    GameRead,
)
from wonderboard.schemas.player import PlayerRead

logger = logging.getLogger(__name__)


def _to_game_read(game: models.Game) -> GameRead:
    return GameRead(
        id=game.id,
        created_at=game.created_at,
        players=[GameParticipantRead.model_validate(p) for p in game.participants],
    )


class SqlRepository:
    """Stores players, games and game participants in three tables.

    One instance wraps one session and is scoped to a single request.
    Every mutating method commits its own transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # -------------------------------------------------------------------------
    # Players
    # -------------------------------------------------------------------------

    async def list_players(self) -> list[PlayerRead]:
        query = select(models.Player).order_by(models.Player.created_at)
        result = await self.session.execute(query)
        return [PlayerRead.model_validate(p) for p in result.scalars().all()]

    async def get_player(self, player_id: str) -> PlayerRead | None:
        player = await self.session.get(models.Player, str(player_id))
        return PlayerRead.model_validate(player) if player else None

    async def create_player(self, name: str) -> PlayerRead:
        new_player = models.Player(name=name)
        try:
            self.session.add(new_player)
            await self.session.commit()
            await self.session.refresh(new_player)
        except IntegrityError:
            # Exact-name race with another request; the unique index caught it
            await self.session.rollback()
            raise DuplicatePlayerNameError(name)

        return PlayerRead.model_validate(new_player)

    async def delete_player(self, player_id: str) -> bool:
        player = await self.session.get(models.Player, str(player_id))
        if player is None:
            return False

        query = (
            select(models.GameParticipant.id)
            .where(models.GameParticipant.player_id == player.id)
            .limit(1)
        )
        if (await self.session.execute(query)).first() is not None:
            raise PlayerHasGamesError(player.id)

        await self.session.delete(player)
        await self.session.commit()
        return True

    # -------------------------------------------------------------------------
    # Games
    # -------------------------------------------------------------------------

    async def list_games(self) -> list[GameRead]:
        query = (
            select(models.Game)
            .order_by(models.Game.created_at)
            .options(selectinload(models.Game.participants))
        )
        result = await self.session.execute(query)
        return [_to_game_read(game) for game in result.scalars().unique().all()]

    async def get_game(self, game_id: str) -> GameRead | None:
        query = (
            select(models.Game)
            .where(models.Game.id == str(game_id))
            .options(selectinload(models.Game.participants))
            .execution_options(populate_existing=True)
        )
        game = (await self.session.execute(query)).scalar_one_or_none()
        return _to_game_read(game) if game else None

    async def create_game(
        self, participants: Sequence[GameParticipantCreate]
    ) -> GameRead:
        """
        Store the game row, then its participants, in one transaction.

        If inserting the participants fails the whole transaction is rolled
        back, so no game without participants is ever committed.
        """
        new_game = models.Game()
        game_id: str | None = None
        try:
            self.session.add(new_game)
            # Flush to get the game ID (NO COMMIT YET)
            await self.session.flush()
            game_id = new_game.id
            await self._add_participants(new_game, participants)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to store game, rolling back",
                extra={"game_id": game_id, "error": str(e)},
                exc_info=True,
            )
            await self.session.rollback()
            raise StorageError(
                "Failed to create game", details={"game_id": game_id}
            ) from e

        # Re-query to eager load participants in seat order for the response
        created = await self.get_game(new_game.id)
        assert created is not None
        return created

    async def _add_participants(
        self, game: models.Game, participants: Sequence[GameParticipantCreate]
    ) -> None:
        for seat, participant in enumerate(participants):
            self.session.add(
                models.GameParticipant(
                    game_id=game.id,
                    player_id=str(participant.player_id),
                    wonder_name=participant.wonder_name,
                    score=participant.score,
                    seat=seat,
                )
            )
        await self.session.flush()

    async def delete_game(self, game_id: str) -> bool:
        query = (
            select(models.Game)
            .where(models.Game.id == str(game_id))
            .options(selectinload(models.Game.participants))
        )
        game = (await self.session.execute(query)).scalar_one_or_none()
        if game is None:
            return False

        # cascade="all, delete-orphan" removes the participant rows as well
        await self.session.delete(game)
        await self.session.commit()
        return True
