# src/wonderboard/services/__init__.py

"""Business logic between the HTTP layer and the repository."""
