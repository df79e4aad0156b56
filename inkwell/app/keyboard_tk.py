"""Tk glue for the action dispatcher.

Shortcuts are bound on a dedicated bind tag placed in front of each
attached widget's own tags, so a matched shortcut returns ``"break"`` before
the widget class bindings (Text inserts, Emacs-style Ctrl keys) run.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..domain.actions import KeyEvent
from .action_dispatcher import ActionDispatcher

SHORTCUT_TAG = "InkwellShortcuts"

SHIFT_MASK = 0x0001
CONTROL_MASK = 0x0004
# Command on macOS (Mod1), Super on X11 (Mod4); Windows has no usable mask.
META_MASKS = {"aqua": 0x0008, "x11": 0x0040, "win32": 0x0}

_KEYSYM_CHARS = {
    "comma": ",",
    "period": ".",
    "slash": "/",
    "semicolon": ";",
    "minus": "-",
    "equal": "=",
    "space": " ",
}


def windowing_system(widget: Any) -> str:
    try:
        return str(widget.tk.call("tk", "windowingsystem"))
    except Exception:
        return "x11"


def translate_tk_event(tk_event: Any, system: str = "x11") -> KeyEvent:
    """Build a toolkit-neutral ``KeyEvent`` from a Tk ``<KeyPress>`` event."""
    state = int(getattr(tk_event, "state", 0) or 0)
    keysym = str(getattr(tk_event, "keysym", "") or "")
    if len(keysym) == 1:
        key = keysym
    else:
        key = _KEYSYM_CHARS.get(keysym.lower(), keysym)
    meta_mask = META_MASKS.get(system, 0)
    return KeyEvent(
        key=key,
        ctrl_key=bool(state & CONTROL_MASK),
        meta_key=bool(meta_mask and state & meta_mask),
        shift_key=bool(state & SHIFT_MASK),
    )


def attach_shortcuts(widget: Any) -> None:
    """Put the shortcut tag first in ``widget``'s bind tags (idempotent)."""
    tags = tuple(widget.bindtags())
    if SHORTCUT_TAG not in tags:
        widget.bindtags((SHORTCUT_TAG,) + tags)


def bind_dispatcher(
    root: Any,
    dispatcher: ActionDispatcher,
    *,
    widgets: Iterable[Any] = (),
    system: Optional[str] = None,
) -> str:
    """Route key presses on ``root`` and ``widgets`` through ``dispatcher``.

    Returns the Tk function id of the class binding.
    """
    ws = system or windowing_system(root)

    def _on_key(tk_event: Any) -> Optional[str]:
        event = translate_tk_event(tk_event, ws)
        if dispatcher.handle_key_down(event) and event.default_prevented:
            return "break"
        return None

    funcid = root.bind_class(SHORTCUT_TAG, "<KeyPress>", _on_key)
    attach_shortcuts(root)
    for widget in widgets:
        attach_shortcuts(widget)
    return funcid


def unbind_dispatcher(root: Any) -> None:
    root.unbind_class(SHORTCUT_TAG, "<KeyPress>")


__all__ = [
    "SHORTCUT_TAG",
    "attach_shortcuts",
    "bind_dispatcher",
    "translate_tk_event",
    "unbind_dispatcher",
    "windowing_system",
]
