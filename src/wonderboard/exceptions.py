# src/wonderboard/exceptions.py

"""Custom exception hierarchy for Wonderboard.

This module provides a structured exception hierarchy that enables:
1. Proper HTTP status code mapping in the global exception handlers
2. Detailed error context for logging and debugging
3. Clear distinction between client mistakes and storage failures
"""

from __future__ import annotations


class WonderboardError(Exception):
    """Base exception for all Wonderboard errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Resource Not Found Errors (HTTP 404)
# =============================================================================


class ResourceNotFoundError(WonderboardError):
    """Base class for resource not found errors."""

    pass


class PlayerNotFoundError(ResourceNotFoundError):
    """Raised when a player ID does not exist."""

    def __init__(self, player_id: str) -> None:
        super().__init__(
            message=f"Player with ID {player_id} not found",
            details={"player_id": str(player_id)},
        )


class GameNotFoundError(ResourceNotFoundError):
    """Raised when a game ID does not exist."""

    def __init__(self, game_id: str) -> None:
        super().__init__(
            message=f"Game with ID {game_id} not found",
            details={"game_id": str(game_id)},
        )


# =============================================================================
# Validation Errors (HTTP 400)
# =============================================================================


class ValidationError(WonderboardError):
    """Base class for request validation errors."""

    pass


class UnknownPlayerError(ValidationError):
    """Raised when a game references a player that does not exist."""

    def __init__(self, player_id: str) -> None:
        super().__init__(
            message=f"Player with ID {player_id} does not exist",
            details={"player_id": str(player_id)},
        )


# =============================================================================
# Conflict Errors (HTTP 400)
# =============================================================================


class ConflictError(WonderboardError):
    """Base class for requests that clash with stored records."""

    pass


class DuplicatePlayerNameError(ConflictError):
    """Raised when a player name is already taken (case-insensitive)."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message="Player name already exists",
            details={"player_name": name},
        )


class PlayerHasGamesError(ConflictError):
    """Raised when deleting a player who still appears in recorded games."""

    def __init__(self, player_id: str) -> None:
        super().__init__(
            message="Cannot delete player who has played games. Delete games first.",
            details={"player_id": str(player_id)},
        )


# =============================================================================
# Internal Errors (HTTP 500)
# =============================================================================


class StorageError(WonderboardError):
    """Raised when the underlying persistence layer fails."""

    pass


class SnapshotIntegrityError(WonderboardError):
    """Raised when stored records reference unknown players or wonders.

    Write-time validation should make this impossible, so it always
    indicates corrupted or hand-edited data.
    """

    def __init__(self, message: str, **details: str) -> None:
        super().__init__(message=message, details=details)
