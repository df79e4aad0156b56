"""Use case for deleting a file or folder.

Confirmation is the caller's job; this only forwards the request.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import PathStr, WorkspacePort
from .error_mapping import map_bridge_error


@dataclass
class DeleteNode:
    workspace: WorkspacePort

    async def __call__(self, path: PathStr) -> None:
        try:
            await self.workspace.delete_node(path)
        except Exception as exc:
            raise map_bridge_error(exc, default_code="DELETE_FAILED") from exc
