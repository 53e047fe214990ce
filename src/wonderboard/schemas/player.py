# src/wonderboard/schemas/player.py

"""Pydantic schemas for the Player resource."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from .common import CamelModel


# ===============================================
# Create Schema: Defines the accepted request body
# ===============================================
class PlayerCreate(CamelModel):
    """Properties to receive via API on create.

    The name is trimmed before the length constraints are checked.
    """

    name: str = Field(..., min_length=1, max_length=50)

    model_config = ConfigDict(str_strip_whitespace=True)


# ===============================================
# Read Schema: Defines attributes for returning data
# ===============================================
class PlayerRead(CamelModel):
    """Properties to return to the client."""

    id: UUID
    name: str
    created_at: datetime
