# src/wonderboard/api/stats.py

"""API endpoints for leaderboard statistics."""

from fastapi import APIRouter, Depends

from wonderboard.api.deps import get_repository
from wonderboard.repository import Repository
from wonderboard.schemas.stats import PlayerStats, WonderStats
from wonderboard.services import stats_service

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/players", response_model=list[PlayerStats])
async def read_player_stats(
    repo: Repository = Depends(get_repository),
) -> list[PlayerStats]:
    """
    Win and score statistics for every player, with a per-wonder breakdown.

    Rates are percentages; players without games report 0 for both the
    win rate and the average score.
    """
    return await stats_service.player_stats(repo)


@router.get("/wonders", response_model=list[WonderStats])
async def read_wonder_stats(
    repo: Repository = Depends(get_repository),
) -> list[WonderStats]:
    """
    Win and score statistics per wonder. Wonders never played are left out.
    """
    return await stats_service.wonder_stats(repo)
