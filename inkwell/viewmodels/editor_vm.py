from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..domain.entries import DirEntry

PathStr = str


@dataclass
class EditorVM:
    """Holds editor session state. Pure UI-logic, no I/O.

    Responsibilities
    - Track the active workspace root, open document, and buffer text
    - Track dirty state so SAVE and autosave know when to write
    - Hold the preview/autosave toggles and the recent-files snapshot
    - Hold the host-ordered directory listing shown in the file tree
    """

    on_changed: Optional[Callable[["EditorVM"], None]] = None

    workspace_root: Optional[PathStr] = None
    current_path: Optional[PathStr] = None
    buffer: str = ""
    dirty: bool = False
    preview_enabled: bool = False
    autosave_enabled: bool = False
    recents: List[PathStr] = field(default_factory=list)
    entries: List[DirEntry] = field(default_factory=list)

    # ---- Workspace ----
    def set_workspace(self, root: PathStr) -> None:
        self.workspace_root = root
        self.current_path = None
        self.buffer = ""
        self.dirty = False
        self.entries = []
        self._notify()

    def set_entries(self, entries: List[DirEntry]) -> None:
        self.entries = list(entries)
        self._notify()

    @staticmethod
    def child_path(name: str, folder: PathStr = "") -> PathStr:
        """Workspace-relative path for a new node named ``name`` in ``folder``."""
        clean = (name or "").strip().strip("/")
        base = (folder or "").rstrip("/")
        return f"{base}/{clean}" if base else clean

    # ---- Document ----
    def load_document(self, path: PathStr, content: str) -> None:
        self.current_path = path
        self.buffer = content
        self.dirty = False
        self._notify()

    def close_document(self) -> None:
        self.current_path = None
        self.buffer = ""
        self.dirty = False
        self._notify()

    def edit_buffer(self, text: str) -> None:
        if text == self.buffer:
            return
        self.buffer = text
        self.dirty = True
        self._notify()

    def mark_saved(self, path: Optional[PathStr] = None) -> None:
        if path:
            self.current_path = path
        self.dirty = False
        self._notify()

    # ---- Toggles ----
    def toggle_preview(self) -> bool:
        self.preview_enabled = not self.preview_enabled
        self._notify()
        return self.preview_enabled

    def toggle_autosave(self) -> bool:
        self.autosave_enabled = not self.autosave_enabled
        self._notify()
        return self.autosave_enabled

    # ---- Recents ----
    def set_recents(self, recents: List[PathStr]) -> None:
        self.recents = list(recents)
        self._notify()

    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed(self)
