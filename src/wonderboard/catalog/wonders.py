# src/wonderboard/catalog/wonders.py

"""The fixed catalog of the seven wonders.

Declaration order is the default display order and the order in which
per-wonder statistics are reported.
"""

from wonderboard.schemas.wonder import Wonder

WONDERS: tuple[Wonder, ...] = (
    Wonder(name="alexandria", display_name="The Lighthouse of Alexandria"),
    Wonder(name="babylon", display_name="The Hanging Gardens of Babylon"),
    Wonder(name="colossus", display_name="The Colossus of Rhodes"),
    Wonder(name="ephesos", display_name="The Temple of Artemis at Ephesus"),
    Wonder(name="gizah", display_name="The Great Pyramid of Giza"),
    Wonder(name="halicarnassus", display_name="The Mausoleum of Halicarnassus"),
    Wonder(name="olympia", display_name="The Statue of Zeus at Olympia"),
)

_BY_NAME: dict[str, Wonder] = {wonder.name: wonder for wonder in WONDERS}


def all_wonders() -> tuple[Wonder, ...]:
    """Return every wonder in declaration order."""
    return WONDERS


def by_name(name: str) -> Wonder | None:
    """Look up a wonder by its catalog id, or None if there is no such wonder."""
    return _BY_NAME.get(name)


def is_valid(name: str) -> bool:
    return name in _BY_NAME
