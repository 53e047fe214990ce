# src/wonderboard/api/__init__.py

"""HTTP routers and their dependencies."""
