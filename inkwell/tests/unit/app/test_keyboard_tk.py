from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Dict, Tuple

from inkwell.app.action_dispatcher import ActionDispatcher
from inkwell.app.keyboard_tk import (
    SHORTCUT_TAG,
    attach_shortcuts,
    bind_dispatcher,
    translate_tk_event,
    unbind_dispatcher,
)
from inkwell.domain.actions import Action


class _FakeTkRoot:
    """Records class bindings and bind tags like a Tk widget."""

    def __init__(self, system: str = "x11") -> None:
        self._tags: Tuple[str, ...] = (".", "Tk", "all")
        self.class_bindings: Dict[Tuple[str, str], Callable[[Any], Any]] = {}
        self.tk = SimpleNamespace(call=lambda *args: system)

    def bindtags(self, tags: Tuple[str, ...] | None = None):
        if tags is None:
            return self._tags
        self._tags = tuple(tags)
        return None

    def bind_class(self, tag: str, sequence: str, func: Callable[[Any], Any]) -> str:
        self.class_bindings[(tag, sequence)] = func
        return "funcid-1"

    def unbind_class(self, tag: str, sequence: str) -> None:
        self.class_bindings.pop((tag, sequence), None)


def _tk_event(keysym: str, state: int = 0):
    return SimpleNamespace(keysym=keysym, state=state, char="")


def test_translate_control_and_shift_bits():
    event = translate_tk_event(_tk_event("N", state=0x4 | 0x1))

    assert event.key == "N"
    assert event.ctrl_key is True
    assert event.shift_key is True
    assert event.meta_key is False


def test_translate_named_keysyms():
    assert translate_tk_event(_tk_event("comma", state=0x4)).key == ","
    assert translate_tk_event(_tk_event("Return", state=0x4)).key == "Return"


def test_meta_mask_depends_on_windowing_system():
    assert translate_tk_event(_tk_event("s", state=0x8), "aqua").meta_key is True
    assert translate_tk_event(_tk_event("s", state=0x8), "x11").meta_key is False
    assert translate_tk_event(_tk_event("s", state=0x40), "x11").meta_key is True
    assert translate_tk_event(_tk_event("s", state=0x40), "win32").meta_key is False


def test_bound_shortcut_breaks_when_handled():
    root = _FakeTkRoot()
    dispatcher = ActionDispatcher()
    calls = []
    dispatcher.register_action(Action.SAVE, lambda: calls.append("save"))

    funcid = bind_dispatcher(root, dispatcher)
    callback = root.class_bindings[(SHORTCUT_TAG, "<KeyPress>")]

    assert funcid == "funcid-1"
    assert root.bindtags()[0] == SHORTCUT_TAG
    assert callback(_tk_event("s", state=0x4)) == "break"
    assert callback(_tk_event("S", state=0x4 | 0x1)) is None
    assert callback(_tk_event("s")) is None
    assert calls == ["save"]


def test_unhandled_action_does_not_break():
    root = _FakeTkRoot(system="aqua")
    bind_dispatcher(root, ActionDispatcher())
    callback = root.class_bindings[(SHORTCUT_TAG, "<KeyPress>")]

    assert callback(_tk_event("p", state=0x8)) is None


def test_attach_is_idempotent_and_unbind_clears():
    root = _FakeTkRoot()
    text = _FakeTkRoot()
    bind_dispatcher(root, ActionDispatcher(), widgets=[text])
    attach_shortcuts(text)

    assert text.bindtags().count(SHORTCUT_TAG) == 1

    unbind_dispatcher(root)
    assert root.class_bindings == {}
