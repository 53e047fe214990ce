# src/wonderboard/stats/engine.py

"""Leaderboard and history calculations over a snapshot of records.

Every function here is pure: it receives the full list of players and
games, derives a view, and never touches storage. Calling any of them twice
on the same snapshot yields identical output.

Ranking policy
--------------
Participants of a game are ordered by score, highest first, with a stable
sort. When several participants share the top score, the one listed first
in the game wins and the others follow in their listed order. Positions are
always sequential (1..N); tied scores never share a position.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from wonderboard.catalog import wonders
from wonderboard.exceptions import SnapshotIntegrityError
from wonderboard.schemas.game import GameParticipantRead, GameRead
from wonderboard.schemas.player import PlayerRead
from wonderboard.schemas.stats import (
    GameHistory,
    GameHistoryEntry,
    PlayerStats,
    PlayerWonderStats,
    WonderStats,
)
from wonderboard.schemas.wonder import Wonder

logger = logging.getLogger(__name__)


# =============================================================================
# Ranking
# =============================================================================


def rank_participants(game: GameRead) -> list[GameParticipantRead]:
    """Return the participants of a game in finishing order."""
    return sorted(game.players, key=lambda p: -p.score)


def winner_of(game: GameRead) -> GameParticipantRead:
    """Return the winning participant of a game (first listed on ties)."""
    return rank_participants(game)[0]


def _rate(wins: int, games: int) -> float:
    return wins / games * 100 if games > 0 else 0.0


def _average(total: int, games: int) -> float:
    return total / games if games > 0 else 0.0


def _find_participant(game: GameRead, player_id: UUID) -> GameParticipantRead | None:
    for participant in game.players:
        if participant.player_id == player_id:
            return participant
    return None


def _require_wonder(name: str) -> Wonder:
    wonder = wonders.by_name(name)
    if wonder is None:
        raise SnapshotIntegrityError(
            f"Game references unknown wonder '{name}'", wonder_name=name
        )
    return wonder


def _check_wonders(games: Sequence[GameRead]) -> None:
    for game in games:
        for participant in game.players:
            _require_wonder(participant.wonder_name)


# =============================================================================
# Player statistics
# =============================================================================


def calculate_player_stats(
    players: Sequence[PlayerRead], games: Sequence[GameRead]
) -> list[PlayerStats]:
    """
    Compute win/score aggregates for every player.

    Players without games are included with zero counts, and their rates
    and averages are exactly 0. The per-wonder breakdown follows catalog
    order and leaves out wonders the player never played.
    """
    _check_wonders(games)
    winners = {game.id: winner_of(game).player_id for game in games}
    results: list[PlayerStats] = []

    for player in players:
        # (game, participant) pairs for every game this player was in
        played = [
            (game, participant)
            for game in games
            if (participant := _find_participant(game, player.id)) is not None
        ]

        total_games = len(played)
        wins = sum(1 for game, _ in played if winners[game.id] == player.id)
        total_score = sum(participant.score for _, participant in played)

        wonder_stats: list[PlayerWonderStats] = []
        for wonder in wonders.all_wonders():
            with_wonder = [
                (game, participant)
                for game, participant in played
                if participant.wonder_name == wonder.name
            ]
            if not with_wonder:
                continue

            wonder_games = len(with_wonder)
            wonder_wins = sum(
                1 for game, _ in with_wonder if winners[game.id] == player.id
            )
            wonder_score = sum(participant.score for _, participant in with_wonder)
            wonder_stats.append(
                PlayerWonderStats(
                    wonder_name=wonder.name,
                    wonder_display_name=wonder.display_name,
                    games_played=wonder_games,
                    wins=wonder_wins,
                    win_rate=_rate(wonder_wins, wonder_games),
                    average_score=_average(wonder_score, wonder_games),
                )
            )

        results.append(
            PlayerStats(
                player_id=player.id,
                player_name=player.name,
                total_games=total_games,
                wins=wins,
                win_rate=_rate(wins, total_games),
                average_score=_average(total_score, total_games),
                wonder_stats=wonder_stats,
            )
        )

    logger.debug(
        "Calculated player stats",
        extra={"player_count": len(players), "game_count": len(games)},
    )
    return results


# =============================================================================
# Wonder statistics
# =============================================================================


def calculate_wonder_stats(games: Sequence[GameRead]) -> list[WonderStats]:
    """
    Compute win/score aggregates for every wonder that has been played.

    Wonders that appear in no game are omitted entirely.
    """
    _check_wonders(games)

    results: list[WonderStats] = []
    for wonder in wonders.all_wonders():
        total_games = 0
        wins = 0
        total_score = 0

        for game in games:
            wonder_player = next(
                (p for p in game.players if p.wonder_name == wonder.name), None
            )
            if wonder_player is None:
                continue

            total_games += 1
            total_score += wonder_player.score
            if winner_of(game).player_id == wonder_player.player_id:
                wins += 1

        if total_games == 0:
            continue

        results.append(
            WonderStats(
                wonder_name=wonder.name,
                wonder_display_name=wonder.display_name,
                total_games=total_games,
                wins=wins,
                win_rate=_rate(wins, total_games),
                average_score=_average(total_score, total_games),
            )
        )

    return results


# =============================================================================
# Game history
# =============================================================================


def get_game_history(
    players: Sequence[PlayerRead], games: Sequence[GameRead]
) -> list[GameHistory]:
    """
    Build the game history, newest game first.

    Names are resolved against the current player list, so a renamed
    player shows the new name in every past game.

    Raises:
        SnapshotIntegrityError: If a participant references an unknown
            player or wonder.
    """
    names = {player.id: player.name for player in players}
    history: list[GameHistory] = []

    for game in games:
        entries: list[GameHistoryEntry] = []
        for position, participant in enumerate(rank_participants(game), start=1):
            player_name = names.get(participant.player_id)
            if player_name is None:
                raise SnapshotIntegrityError(
                    f"Game {game.id} references unknown player "
                    f"{participant.player_id}",
                    game_id=str(game.id),
                    player_id=str(participant.player_id),
                )
            wonder = _require_wonder(participant.wonder_name)

            entries.append(
                GameHistoryEntry(
                    player_id=participant.player_id,
                    player_name=player_name,
                    wonder_name=wonder.name,
                    wonder_display_name=wonder.display_name,
                    score=participant.score,
                    position=position,
                )
            )

        history.append(
            GameHistory(id=game.id, created_at=game.created_at, players=entries)
        )

    history.sort(key=lambda g: g.created_at, reverse=True)
    return history
