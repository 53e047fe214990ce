# src/wonderboard/schemas/wonder.py

"""Pydantic schema for the Wonder resource."""

from pydantic import ConfigDict

from .common import CamelModel


class Wonder(CamelModel):
    """One of the seven wonders a participant can play."""

    name: str
    display_name: str

    model_config = ConfigDict(frozen=True)
