from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..domain.entries import DirEntry
from ..domain.ports import PathStr, WorkspacePort
from .error_mapping import map_bridge_error


@dataclass
class ListWorkspace:
    """List a directory and decode the host's entry markers, keeping host order."""
    workspace: WorkspacePort

    async def __call__(self, path: PathStr = "") -> List[DirEntry]:
        try:
            raw_entries = await self.workspace.list_dir(path)
        except Exception as exc:
            raise map_bridge_error(exc, default_code="LIST_FAILED") from exc
        return [DirEntry.parse(raw) for raw in raw_entries]
