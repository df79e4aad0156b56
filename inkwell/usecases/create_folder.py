from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import PathStr, UseCaseError, WorkspacePort
from .error_mapping import map_bridge_error


@dataclass
class CreateFolder:
    workspace: WorkspacePort

    async def __call__(self, path: PathStr) -> None:
        if not (path or "").strip():
            raise UseCaseError("INVALID_NAME", "Folder name must not be empty.")
        try:
            await self.workspace.create_dir(path)
        except Exception as exc:
            raise map_bridge_error(exc, default_code="CREATE_FOLDER_FAILED") from exc
