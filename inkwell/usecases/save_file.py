from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import PathStr, RecentsPort, WorkspacePort
from .error_mapping import map_bridge_error
from .open_file import remember_recent


@dataclass
class SaveFile:
    """Write the buffer to ``path`` (overwriting) and record it as recent."""
    workspace: WorkspacePort
    recents: RecentsPort

    async def __call__(self, path: PathStr, content: str) -> None:
        try:
            await self.workspace.write_file(path, content)
        except Exception as exc:
            raise map_bridge_error(exc, default_code="SAVE_FAILED") from exc
        remember_recent(self.recents, path)
