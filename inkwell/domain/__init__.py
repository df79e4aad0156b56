"""Domain package exports for value objects and ports."""

from .actions import Action, KeyChord, KeyEvent, classify_key_event
from .entries import DirEntry
from .ports import PickerOptions, UseCaseError
from .recents import MAX_RECENTS, bump_recent

__all__ = [
    "Action",
    "DirEntry",
    "KeyChord",
    "KeyEvent",
    "MAX_RECENTS",
    "PickerOptions",
    "UseCaseError",
    "bump_recent",
    "classify_key_event",
]
