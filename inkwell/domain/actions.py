"""Application actions and the keyboard shortcut grammar.

``classify_key_event`` is the whole shortcut table. It is pure: it never
touches the event beyond reading its key and modifier fields, so the
dispatcher decides separately whether the event gets suppressed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Protocol, Tuple


class Action(str, Enum):
    NEW_FILE = "NEW_FILE"
    NEW_FOLDER = "NEW_FOLDER"
    SAVE = "SAVE"
    TOGGLE_PREVIEW = "TOGGLE_PREVIEW"
    TOGGLE_AUTOSAVE = "TOGGLE_AUTOSAVE"


class KeyEventLike(Protocol):
    key: str
    ctrl_key: bool
    meta_key: bool
    shift_key: bool

    def prevent_default(self) -> None: ...
    def stop_propagation(self) -> None: ...


@dataclass
class KeyEvent:
    """Toolkit-neutral key press.

    ``default_prevented`` and ``propagation_stopped`` record what the
    dispatcher did, so toolkit glue can translate them (Tk: return "break").
    """

    key: str
    ctrl_key: bool = False
    meta_key: bool = False
    shift_key: bool = False
    default_prevented: bool = field(default=False, init=False)
    propagation_stopped: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass(frozen=True)
class KeyChord:
    key: str
    modifier: bool
    shift: bool

    @classmethod
    def from_event(cls, event: KeyEventLike) -> "KeyChord":
        return cls(
            key=(event.key or "").lower(),
            modifier=bool(event.ctrl_key or event.meta_key),
            shift=bool(event.shift_key),
        )


# (key, shift) -> action. Shift variants of s/p/, are inert on purpose.
SHORTCUTS: Dict[Tuple[str, bool], Optional[Action]] = {
    ("n", False): Action.NEW_FILE,
    ("n", True): Action.NEW_FOLDER,
    ("s", False): Action.SAVE,
    ("s", True): None,
    ("p", False): Action.TOGGLE_PREVIEW,
    ("p", True): None,
    (",", False): Action.TOGGLE_AUTOSAVE,
    (",", True): None,
}


def classify_chord(chord: KeyChord) -> Optional[Action]:
    if not chord.modifier:
        return None
    return SHORTCUTS.get((chord.key, chord.shift))


def classify_key_event(event: KeyEventLike) -> Optional[Action]:
    """Map a key event to at most one action; modifier-free keys never match."""
    if not (event.ctrl_key or event.meta_key):
        return None
    return classify_chord(KeyChord.from_event(event))


__all__ = [
    "Action",
    "KeyChord",
    "KeyEvent",
    "KeyEventLike",
    "SHORTCUTS",
    "classify_chord",
    "classify_key_event",
]
