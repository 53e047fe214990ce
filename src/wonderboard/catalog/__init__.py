# src/wonderboard/catalog/__init__.py

"""Static reference data known at process start."""
