"""Typed facade over the host's file/workspace operations.

Each method is one round trip through the bridge with a fixed payload shape.
Operation names are the wire contract with the host executor and must not
change. Nothing here retries, sorts, or reinterprets host failures.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from inkwell.domain.ports import (
    BridgePort,
    FolderPickerPort,
    PathStr,
    PickerOptions,
    PickerResult,
    WorkspacePort,
)

FOLDER_PICKER_OPTIONS = PickerOptions(directory=True, multiple=False, recursive=True)


class WorkspaceGateway(WorkspacePort):
    """Workspace operations routed through a ``BridgePort``."""

    def __init__(self, bridge: BridgePort, picker: FolderPickerPort) -> None:
        self.bridge = bridge
        self.picker = picker
        self._log = logging.getLogger(__name__)

    async def read_file(self, path: PathStr) -> str:
        content = await self.bridge.call("read_file", {"path": path})
        return "" if content is None else str(content)

    async def write_file(self, path: PathStr, content: str) -> None:
        await self.bridge.call("write_file", {"path": path, "content": content})

    async def list_dir(self, path: PathStr) -> List[str]:
        entries = await self.bridge.call("list_dir", {"path": path})
        if entries is None:
            return []
        return [str(entry) for entry in entries]

    async def set_workspace(self, path: PathStr) -> None:
        await self.bridge.call("set_workspace", {"path": path})

    async def open_folder(self) -> Optional[PathStr]:
        selected = self.picker.pick(FOLDER_PICKER_OPTIONS)
        folder = normalize_picker_result(selected)
        self._log.debug("Folder picker returned %r", folder)
        return folder

    async def create_dir(self, path: PathStr) -> None:
        await self.bridge.call("create_dir", {"path": path})

    async def delete_node(self, path: PathStr) -> None:
        await self.bridge.call("delete_node", {"path": path})


def normalize_picker_result(selected: PickerResult) -> Optional[PathStr]:
    """Narrow a picker result to a single path or None.

    Empty selections (None, "", []) mean the user cancelled. Lists are
    narrowed to their first element regardless of picker configuration.
    """
    if selected is None:
        return None
    if isinstance(selected, (list, tuple)):
        if not selected:
            return None
        first: Any = selected[0]
        return str(first) if first else None
    text = str(selected)
    return text or None


__all__ = ["FOLDER_PICKER_OPTIONS", "WorkspaceGateway", "normalize_picker_result"]
