# src/wonderboard/api/wonder.py

"""API endpoints for the wonder catalog."""

from fastapi import APIRouter

from wonderboard.catalog import wonders
from wonderboard.schemas.wonder import Wonder

router = APIRouter(prefix="/wonders", tags=["Wonders"])


@router.get("", response_model=list[Wonder])
async def read_wonders() -> tuple[Wonder, ...]:
    """
    List the seven wonders in their default display order.
    """
    return wonders.all_wonders()
