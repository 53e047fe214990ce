# src/wonderboard/db/models.py

"""Database models for the relational Wonderboard backend."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, List

from sqlalchemy import DateTime, ForeignKey, String, TypeDecorator, UniqueConstraint
from sqlalchemy.orm import Mapped, declarative_base, mapped_column, relationship

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp stored as UTC.

    SQLite keeps no offset, so values read back naive are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect: Any):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


# ===============================================
# Core Tables: Player and Game
# ===============================================


class Player(Base):
    """A member of the group who can take part in games."""

    __tablename__ = "players"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=_utcnow, nullable=False
    )

    # No cascade: a player with participations must not be deleted
    participations: Mapped[List["GameParticipant"]] = relationship(
        back_populates="player", passive_deletes=True
    )

    def __init__(self, name: str, **kw: Any):
        super().__init__(**kw)
        self.name = name


class Game(Base):
    """A single completed game session."""

    __tablename__ = "games"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=_utcnow, nullable=False, index=True
    )

    # Ordered by seat so the submission order survives a round trip;
    # the winner on tied scores depends on it.
    participants: Mapped[List["GameParticipant"]] = relationship(
        back_populates="game",
        cascade="all, delete-orphan",
        order_by="GameParticipant.seat",
    )


class GameParticipant(Base):
    """Links a Player to a Game with the wonder they played and their score."""

    __tablename__ = "game_participants"
    id: Mapped[int] = mapped_column(primary_key=True)
    game_id: Mapped[str] = mapped_column(
        ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True
    )
    player_id: Mapped[str] = mapped_column(
        ForeignKey("players.id"), nullable=False, index=True
    )
    wonder_name: Mapped[str] = mapped_column(String(32), nullable=False)
    score: Mapped[int] = mapped_column(nullable=False)

    # Zero-based position in the submitted participant list
    seat: Mapped[int] = mapped_column(nullable=False)

    player: Mapped["Player"] = relationship(back_populates="participations")
    game: Mapped["Game"] = relationship(back_populates="participants")

    __table_args__ = (
        UniqueConstraint("game_id", "wonder_name", name="_game_wonder_uc"),
        UniqueConstraint("game_id", "player_id", name="_game_player_uc"),
    )
