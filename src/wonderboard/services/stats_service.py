# src/wonderboard/services/stats_service.py

"""Reads a fresh snapshot from the repository and feeds the stats engine."""

from wonderboard.repository import Repository
from wonderboard.schemas.stats import GameHistory, PlayerStats, WonderStats
from wonderboard.stats import engine


async def player_stats(repo: Repository) -> list[PlayerStats]:
    players = await repo.list_players()
    games = await repo.list_games()
    return engine.calculate_player_stats(players, games)


async def wonder_stats(repo: Repository) -> list[WonderStats]:
    return engine.calculate_wonder_stats(await repo.list_games())


async def game_history(repo: Repository) -> list[GameHistory]:
    players = await repo.list_players()
    games = await repo.list_games()
    return engine.get_game_history(players, games)
