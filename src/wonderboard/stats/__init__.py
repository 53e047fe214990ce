# src/wonderboard/stats/__init__.py

"""Pure statistics calculations over repository snapshots."""
