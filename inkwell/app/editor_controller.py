"""UI-facing controller that owns the editor's keyboard actions.

The controller registers one handler per ``Action`` on ``mount`` and removes
them on ``unmount``. Handlers are synchronous (the dispatcher calls them from
the key event); anything that reaches the host is spawned as a task on the
running event loop and reports ``UseCaseError`` messages through
``on_error``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Set

from ..domain.actions import Action
from ..domain.ports import PathStr, UseCaseError
from ..viewmodels.editor_vm import EditorVM
from .action_dispatcher import ActionDispatcher
from .services import AppServices

PromptFn = Callable[[str], Optional[str]]
MessageFn = Callable[[str], None]


class EditorController:
    """Coordinate shortcuts, use cases and editor state for one view."""

    def __init__(
        self,
        *,
        services: AppServices,
        vm: EditorVM,
        dispatcher: Optional[ActionDispatcher] = None,
        prompt_name: Optional[PromptFn] = None,
        on_error: Optional[MessageFn] = None,
        on_info: Optional[MessageFn] = None,
    ) -> None:
        """Initialize controller dependencies.

        Args:
            services: Adapter/use-case wiring provider.
            vm: Editor state updated after each operation.
            dispatcher: Action registry; a fresh one is created if omitted.
            prompt_name: Asks the user for a node name; None means cancelled.
            on_error: Receives user-presentable error messages.
            on_info: Receives short status messages.
        """
        self._log = logging.getLogger(__name__)
        self.services = services
        self.vm = vm
        self.dispatcher = dispatcher or ActionDispatcher()
        self._prompt_name = prompt_name
        self._on_error = on_error
        self._on_info = on_info
        self._tasks: Set[asyncio.Task] = set()
        self._mounted = False

        self.vm.preview_enabled = services.config.preview_enabled
        self.vm.autosave_enabled = services.config.autosave_enabled

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def mount(self) -> None:
        self.dispatcher.register_action(Action.NEW_FILE, self._on_new_file)
        self.dispatcher.register_action(Action.NEW_FOLDER, self._on_new_folder)
        self.dispatcher.register_action(Action.SAVE, self._on_save)
        self.dispatcher.register_action(Action.TOGGLE_PREVIEW, self.toggle_preview)
        self.dispatcher.register_action(Action.TOGGLE_AUTOSAVE, self.toggle_autosave)
        self.vm.set_recents(self.services.recents.get_recent_files())
        self._mounted = True

    def unmount(self) -> None:
        for action in Action:
            self.dispatcher.remove_action(action)
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def pending_tasks(self) -> Set[asyncio.Task]:
        return set(self._tasks)

    # ------------------------------------------------------------------
    # Key handlers (synchronous, invoked by the dispatcher)
    # ------------------------------------------------------------------
    def _on_new_file(self) -> None:
        name = self._ask("New file name")
        if name:
            self.spawn(self.create_file(name))

    def _on_new_folder(self) -> None:
        name = self._ask("New folder name")
        if name:
            self.spawn(self.create_folder(name))

    def _on_save(self) -> None:
        if not self.vm.current_path:
            self._info("Nothing to save.")
            return
        self.spawn(self.save())

    def toggle_preview(self) -> None:
        enabled = self.vm.toggle_preview()
        self._persist_toggles()
        self._info(f"Preview {'on' if enabled else 'off'}")

    def toggle_autosave(self) -> None:
        enabled = self.vm.toggle_autosave()
        self._persist_toggles()
        self._info(f"Autosave {'on' if enabled else 'off'}")
        if enabled and self.vm.dirty and self.vm.current_path:
            self.spawn(self.save())

    def buffer_edited(self, text: str) -> None:
        """Record an edit from the view; schedules a save when autosave is on."""
        self.vm.edit_buffer(text)
        if self.vm.autosave_enabled and self.vm.dirty and self.vm.current_path:
            self.spawn(self.save())

    # ------------------------------------------------------------------
    # Operations (awaitable)
    # ------------------------------------------------------------------
    async def open_workspace(self) -> Optional[PathStr]:
        root = await self.services.uc_open_workspace()
        if root is None:
            return None
        self.vm.set_workspace(root)
        await self.refresh_listing()
        return root

    async def refresh_listing(self, folder: PathStr = "") -> None:
        entries = await self.services.uc_list_workspace(folder)
        self.vm.set_entries(entries)

    async def open_file(self, path: PathStr) -> None:
        content = await self.services.uc_open_file(path)
        self.vm.load_document(path, content)
        self.vm.set_recents(self.services.recents.get_recent_files())

    async def save(self) -> None:
        path = self.vm.current_path
        if not path:
            return
        content = self.vm.buffer
        await self.services.uc_save_file(path, content)
        # Keep dirty if the buffer changed while the write was in flight.
        if self.vm.buffer == content:
            self.vm.mark_saved(path)
        self.vm.set_recents(self.services.recents.get_recent_files())

    async def create_file(self, name: str, folder: PathStr = "") -> PathStr:
        path = EditorVM.child_path(name, folder)
        await self.services.uc_create_file(path)
        await self.refresh_listing()
        await self.open_file(path)
        return path

    async def create_folder(self, name: str, folder: PathStr = "") -> PathStr:
        path = EditorVM.child_path(name, folder)
        await self.services.uc_create_folder(path)
        await self.refresh_listing()
        return path

    async def delete(self, path: PathStr) -> None:
        await self.services.uc_delete_node(path)
        if self.vm.current_path == path:
            self.vm.close_document()
        await self.refresh_listing()

    # ------------------------------------------------------------------
    # Task plumbing
    # ------------------------------------------------------------------
    def spawn(self, coro: Awaitable[object]) -> asyncio.Task:
        """Run ``coro`` on the running loop, reporting UseCaseError to the view."""
        task = asyncio.get_running_loop().create_task(self._guarded(coro))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    async def _guarded(self, coro: Awaitable[object]) -> None:
        try:
            await coro
        except UseCaseError as exc:
            self._log.warning("%s: %s", exc.code, exc.message)
            if self._on_error:
                self._on_error(exc.message)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._log.error("Editor task failed", exc_info=exc)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _ask(self, title: str) -> Optional[str]:
        if self._prompt_name is None:
            return None
        name = self._prompt_name(title)
        return name.strip() if name and name.strip() else None

    def _info(self, message: str) -> None:
        self._log.info(message)
        if self._on_info:
            self._on_info(message)

    def _persist_toggles(self) -> None:
        self.services.save_preferences(
            preview_enabled=self.vm.preview_enabled,
            autosave_enabled=self.vm.autosave_enabled,
        )


__all__ = ["EditorController"]
