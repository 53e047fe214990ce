# src/wonderboard/repository/__init__.py

"""Storage backends implementing the Repository capability."""

from .base import Repository
from .json_file import JsonFileRepository
from .sql import SqlRepository

__all__ = ["JsonFileRepository", "Repository", "SqlRepository"]
