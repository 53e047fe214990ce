# src/wonderboard/middleware/__init__.py

"""Middleware components for the Wonderboard API."""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
