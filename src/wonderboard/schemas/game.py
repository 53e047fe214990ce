# src/wonderboard/schemas/game.py

"""Pydantic schemas for the Game resource."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from wonderboard.catalog import wonders

from .common import CamelModel

MIN_PARTICIPANTS = 3
MAX_PARTICIPANTS = 7
MIN_SCORE = 0
MAX_SCORE = 200


# ===============================================
# == Game Participant Schemas
# ===============================================


class GameParticipantBase(CamelModel):
    """Shared properties for a game participant."""

    player_id: UUID
    wonder_name: str
    score: int


class GameParticipantCreate(GameParticipantBase):
    """Properties to receive when recording a participant within a game."""

    # strict: reject 50.0 and "50", scores are whole numbers
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE, strict=True)

    @field_validator("wonder_name")
    @classmethod
    def wonder_must_exist(cls, value: str) -> str:
        if not wonders.is_valid(value):
            valid = ", ".join(w.name for w in wonders.all_wonders())
            raise ValueError(f"Unknown wonder '{value}', expected one of: {valid}")
        return value


class GameParticipantRead(GameParticipantBase):
    """Properties to return to the client for a game participant."""

    pass


# ===============================================
# == Game Schemas
# ===============================================


class GameCreate(CamelModel):
    """
    Properties to receive via API on create.
    This is the main payload for submitting a finished game.
    """

    players: list[GameParticipantCreate] = Field(
        ..., min_length=MIN_PARTICIPANTS, max_length=MAX_PARTICIPANTS
    )

    @field_validator("players")
    @classmethod
    def wonders_must_be_distinct(
        cls, players: list[GameParticipantCreate]
    ) -> list[GameParticipantCreate]:
        names = [p.wonder_name for p in players]
        if len(set(names)) != len(names):
            raise ValueError("Each player must play a different wonder")
        return players

    @field_validator("players")
    @classmethod
    def players_must_be_distinct(
        cls, players: list[GameParticipantCreate]
    ) -> list[GameParticipantCreate]:
        ids = [p.player_id for p in players]
        if len(set(ids)) != len(ids):
            raise ValueError("Each player can only play once per game")
        return players


class GameRead(CamelModel):
    """Properties to return to the client for a game."""

    id: UUID
    created_at: datetime

    # Participants in submission order
    players: list[GameParticipantRead]
