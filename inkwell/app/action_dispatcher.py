"""Keyboard action dispatcher owned by the hosting view.

The dispatcher maps each ``Action`` to at most one zero-argument handler.
Views register their handlers on mount and remove them on unmount; key
events are classified with ``classify_key_event`` and only suppressed when a
handler is actually registered for the matched action. An action without a
handler leaves the event alone so normal input is never blocked.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ..domain.actions import Action, KeyEventLike, classify_key_event

Handler = Callable[[], None]


class ActionDispatcher:
    """Action -> handler registry plus key-down routing."""

    def __init__(self) -> None:
        self._handlers: Dict[Action, Handler] = {}
        self._log = logging.getLogger(__name__)

    def register_action(self, action: Action, handler: Handler) -> None:
        """Register ``handler`` for ``action``, replacing any previous one."""
        self._handlers[Action(action)] = handler

    def remove_action(self, action: Action) -> None:
        self._handlers.pop(Action(action), None)

    def clear(self) -> None:
        self._handlers.clear()

    def handler_for(self, action: Action) -> Optional[Handler]:
        return self._handlers.get(Action(action))

    def handle_key_down(self, event: KeyEventLike) -> bool:
        """Route a key press; returns True when a handler consumed it.

        Handler exceptions propagate to the caller.
        """
        action = classify_key_event(event)
        if action is None:
            return False
        handler = self._handlers.get(action)
        if handler is None:
            return False
        event.prevent_default()
        event.stop_propagation()
        self._log.debug("Shortcut %s", action.value)
        handler()
        return True


__all__ = ["ActionDispatcher", "Handler"]
