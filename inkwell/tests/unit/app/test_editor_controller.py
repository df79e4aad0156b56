from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Mapping, Optional

import pytest

from inkwell.adapters.bridge_errors import HostCallError
from inkwell.adapters.storage_local import StorageLocal
from inkwell.app.config import AppConfig
from inkwell.app.editor_controller import EditorController
from inkwell.app.services import AppServices
from inkwell.domain.actions import Action, KeyEvent
from inkwell.domain.entries import DIR_MARKER, FILE_MARKER
from inkwell.viewmodels.editor_vm import EditorVM


class _HostFake:
    """In-memory stand-in for the host executor."""

    def __init__(self) -> None:
        self.files: Dict[str, str] = {}
        self.dirs: List[str] = []
        self.workspace: Optional[str] = None
        self.calls: List[str] = []

    async def call(self, operation: str, args: Mapping[str, Any]) -> Any:
        self.calls.append(operation)
        path = args.get("path")
        if operation == "read_file":
            if path not in self.files:
                raise HostCallError("No such file or directory (os error 2)", status=404)
            return self.files[path]
        if operation == "write_file":
            self.files[path] = args["content"]
            return None
        if operation == "list_dir":
            entries = [f"{DIR_MARKER} {d}" for d in self.dirs]
            entries += [f"{FILE_MARKER} {f}" for f in self.files]
            return sorted(entries)
        if operation == "set_workspace":
            self.workspace = path
            return None
        if operation == "create_dir":
            self.dirs.append(path)
            return None
        if operation == "delete_node":
            self.files.pop(path)
            return None
        raise AssertionError(f"unexpected operation {operation}")


class _PickerStub:
    def __init__(self, result: Any) -> None:
        self.result = result

    def pick(self, options):
        return self.result


class _MemoryStorage:
    def __init__(self) -> None:
        self.items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


def _controller(*, prompt: Optional[str] = None, picked: Any = None, settings_storage=None, config=None):
    host = _HostFake()
    services = AppServices(
        config or AppConfig(),
        resolver=lambda: host,
        picker=_PickerStub(picked),
        storage=_MemoryStorage(),
        settings_storage=settings_storage,
    )
    errors: List[str] = []
    infos: List[str] = []
    controller = EditorController(
        services=services,
        vm=EditorVM(),
        prompt_name=lambda title: prompt,
        on_error=errors.append,
        on_info=infos.append,
    )
    controller.mount()
    return controller, host, errors, infos


async def _settle(controller: EditorController) -> None:
    while controller.pending_tasks:
        await asyncio.gather(*controller.pending_tasks)


def test_mount_and_unmount_manage_every_action():
    controller, _, _, _ = _controller()

    assert controller.mounted is True
    for action in Action:
        assert controller.dispatcher.handler_for(action) is not None

    controller.unmount()

    assert controller.mounted is False
    for action in Action:
        assert controller.dispatcher.handler_for(action) is None


@pytest.mark.asyncio
async def test_ctrl_s_saves_current_document_and_records_recent():
    controller, host, errors, _ = _controller()
    host.files["notes.md"] = "old"
    await controller.open_file("notes.md")
    controller.buffer_edited("new text")
    event = KeyEvent(key="s", ctrl_key=True)

    assert controller.dispatcher.handle_key_down(event) is True
    await _settle(controller)

    assert event.default_prevented is True
    assert host.files["notes.md"] == "new text"
    assert controller.vm.dirty is False
    assert controller.vm.recents == ["notes.md"]
    assert errors == []


@pytest.mark.asyncio
async def test_save_without_document_only_informs():
    controller, host, _, infos = _controller()

    controller.dispatcher.handle_key_down(KeyEvent(key="s", ctrl_key=True))

    assert controller.pending_tasks == set()
    assert infos == ["Nothing to save."]
    assert "write_file" not in host.calls


@pytest.mark.asyncio
async def test_ctrl_n_creates_and_opens_file():
    controller, host, _, _ = _controller(prompt="todo.md")

    controller.dispatcher.handle_key_down(KeyEvent(key="n", ctrl_key=True))
    await _settle(controller)

    assert host.files == {"todo.md": ""}
    assert controller.vm.current_path == "todo.md"
    assert [e.name for e in controller.vm.entries] == ["todo.md"]
    assert controller.vm.recents == ["todo.md"]


@pytest.mark.asyncio
async def test_ctrl_shift_n_cancelled_prompt_does_nothing():
    controller, host, _, _ = _controller(prompt=None)

    handled = controller.dispatcher.handle_key_down(KeyEvent(key="n", ctrl_key=True, shift_key=True))

    assert handled is True
    assert controller.pending_tasks == set()
    assert host.calls == []


@pytest.mark.asyncio
async def test_ctrl_shift_n_creates_folder():
    controller, host, _, _ = _controller(prompt="  assets  ")

    controller.dispatcher.handle_key_down(KeyEvent(key="n", meta_key=True, shift_key=True))
    await _settle(controller)

    assert host.dirs == ["assets"]
    assert controller.vm.entries[0].is_dir is True


@pytest.mark.asyncio
async def test_open_missing_file_reports_error():
    controller, _, errors, _ = _controller()

    await _settle(controller)
    task = controller.spawn(controller.open_file("missing.md"))
    await task

    assert errors == ["No such file or directory (os error 2)"]
    assert controller.vm.current_path is None


def test_toggles_flip_state_and_persist(tmp_path):
    settings = StorageLocal(root_dir=str(tmp_path))
    controller, _, _, infos = _controller(settings_storage=settings)

    controller.dispatcher.handle_key_down(KeyEvent(key="p", ctrl_key=True))
    controller.dispatcher.handle_key_down(KeyEvent(key=",", ctrl_key=True))

    assert controller.vm.preview_enabled is True
    assert controller.vm.autosave_enabled is True
    assert infos == ["Preview on", "Autosave on"]
    saved = settings.load_user_settings()
    assert saved["preview_enabled"] is True
    assert saved["autosave_enabled"] is True


def test_toggles_start_from_config():
    controller, _, _, _ = _controller(config=AppConfig(preview_enabled=True))

    assert controller.vm.preview_enabled is True
    assert controller.vm.autosave_enabled is False


@pytest.mark.asyncio
async def test_autosave_writes_on_edit():
    controller, host, _, _ = _controller(config=AppConfig(autosave_enabled=True))
    host.files["a.md"] = ""
    await controller.open_file("a.md")

    controller.buffer_edited("typed")
    await _settle(controller)

    assert host.files["a.md"] == "typed"
    assert controller.vm.dirty is False


@pytest.mark.asyncio
async def test_open_workspace_sets_root_and_lists():
    controller, host, _, _ = _controller(picked=["/home/me/notes", "/ignored"])
    host.files["readme.md"] = "hi"

    root = await controller.open_workspace()

    assert root == "/home/me/notes"
    assert host.workspace == "/home/me/notes"
    assert controller.vm.workspace_root == "/home/me/notes"
    assert [e.name for e in controller.vm.entries] == ["readme.md"]


@pytest.mark.asyncio
async def test_open_workspace_cancelled_keeps_state():
    controller, host, _, _ = _controller(picked=None)

    assert await controller.open_workspace() is None
    assert host.calls == []


@pytest.mark.asyncio
async def test_delete_current_document_closes_it():
    controller, host, _, _ = _controller()
    host.files["gone.md"] = "x"
    await controller.open_file("gone.md")

    await controller.delete("gone.md")

    assert controller.vm.current_path is None
    assert controller.vm.entries == []
