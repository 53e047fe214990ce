# src/wonderboard/__init__.py

"""Wonderboard: game records and leaderboards for a board-game group."""

__version__ = "0.1.0"
