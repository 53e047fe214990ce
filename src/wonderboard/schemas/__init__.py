# src/wonderboard/schemas/__init__.py

"""Pydantic schemas for API validation and serialization."""

from .common import CamelModel
from .game import (
    GameCreate,
    GameParticipantBase,
    GameParticipantCreate,
    GameParticipantRead,
    GameRead,
)
from .player import PlayerCreate, PlayerRead
from .stats import (
    GameHistory,
    GameHistoryEntry,
    PlayerStats,
    PlayerWonderStats,
    WonderStats,
)
from .wonder import Wonder

__all__ = [
    # Common
    "CamelModel",
    # Game
    "GameCreate",
    "GameParticipantBase",
    "GameParticipantCreate",
    "GameParticipantRead",
    "GameRead",
    # Player
    "PlayerCreate",
    "PlayerRead",
    # Stats
    "GameHistory",
    "GameHistoryEntry",
    "PlayerStats",
    "PlayerWonderStats",
    "WonderStats",
    # Wonder
    "Wonder",
]
