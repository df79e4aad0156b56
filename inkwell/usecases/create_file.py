from __future__ import annotations

from dataclasses import dataclass

from ..domain.ports import PathStr, UseCaseError, WorkspacePort
from .error_mapping import map_bridge_error


@dataclass
class CreateFile:
    workspace: WorkspacePort

    async def __call__(self, path: PathStr) -> None:
        if not (path or "").strip():
            raise UseCaseError("INVALID_NAME", "File name must not be empty.")
        try:
            await self.workspace.write_file(path, "")
        except Exception as exc:
            raise map_bridge_error(exc, default_code="CREATE_FILE_FAILED") from exc
