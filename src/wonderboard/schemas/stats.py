# src/wonderboard/schemas/stats.py

"""Statistics and history schemas derived from recorded games."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import CamelModel


class PlayerWonderStats(CamelModel):
    """A player's results with one particular wonder.

    Attributes:
        wonder_name: Catalog id of the wonder
        wonder_display_name: Human-readable wonder name
        games_played: Games in which the player played this wonder
        wins: How many of those games the player won
        win_rate: Win percentage (0 - 100)
        average_score: Mean score with this wonder
    """

    wonder_name: str
    wonder_display_name: str
    games_played: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    win_rate: float = Field(0.0, ge=0.0, le=100.0)
    average_score: float = Field(0.0, ge=0.0)


class PlayerStats(CamelModel):
    """Aggregate statistics for a player across all games.

    Attributes:
        player_id: The player's ID
        player_name: The player's current name
        total_games: Games the player took part in
        wins: Games the player won
        win_rate: Win percentage (0 - 100), 0 when no games were played
        average_score: Mean score, 0 when no games were played
        wonder_stats: Per-wonder breakdown, only wonders actually played
    """

    player_id: UUID
    player_name: str
    total_games: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    win_rate: float = Field(0.0, ge=0.0, le=100.0)
    average_score: float = Field(0.0, ge=0.0)
    wonder_stats: list[PlayerWonderStats] = Field(default_factory=list)


class WonderStats(CamelModel):
    """Aggregate statistics for one wonder across all games."""

    wonder_name: str
    wonder_display_name: str
    total_games: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    win_rate: float = Field(0.0, ge=0.0, le=100.0)
    average_score: float = Field(0.0, ge=0.0)


class GameHistoryEntry(CamelModel):
    """One participant of a historical game, ranked by score."""

    player_id: UUID
    player_name: str
    wonder_name: str
    wonder_display_name: str
    score: int
    position: int = Field(..., ge=1, description="Final placing (1-indexed)")


class GameHistory(CamelModel):
    """A recorded game with its participants in finishing order."""

    id: UUID
    created_at: datetime
    players: list[GameHistoryEntry]
