from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.ports import PathStr, WorkspacePort
from .error_mapping import map_bridge_error


@dataclass
class OpenWorkspace:
    """Prompt for a folder and make it the host's active workspace root."""
    workspace: WorkspacePort

    async def __call__(self) -> Optional[PathStr]:
        """Return the chosen root, or None when the user cancelled.

        Raises:
            UseCaseError: If the host refuses the new workspace root.
        """
        folder = await self.workspace.open_folder()
        if folder is None:
            return None
        try:
            await self.workspace.set_workspace(folder)
        except Exception as exc:
            raise map_bridge_error(exc, default_code="SET_WORKSPACE_FAILED") from exc
        return folder
