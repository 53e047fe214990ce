# src/wonderboard/db/__init__.py

"""Relational storage: SQLAlchemy models and session management."""
