"""Use case for opening a file from the active workspace.

Reads the file through the workspace gateway and, on success, bumps the
path to the front of the recent-files list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.ports import PathStr, RecentsPort, WorkspacePort
from .error_mapping import map_bridge_error

log = logging.getLogger(__name__)


@dataclass
class OpenFile:
    """Use-case callable returning the text content of ``path``.

    Attributes:
        workspace: Gateway to the host's file operations.
        recents: Recent-files store updated after a successful read.
    """
    workspace: WorkspacePort
    recents: RecentsPort

    async def __call__(self, path: PathStr) -> str:
        """Read ``path`` and record it as recently opened.

        Raises:
            UseCaseError: If the host rejects or cannot serve the read.
        """
        try:
            content = await self.workspace.read_file(path)
        except Exception as exc:
            raise map_bridge_error(exc, default_code="OPEN_FAILED") from exc
        remember_recent(self.recents, path)
        return content


def remember_recent(recents: RecentsPort, path: PathStr) -> None:
    """Record ``path`` in the recents list; a storage failure only logs."""
    try:
        recents.add_to_recents(path)
    except (OSError, ValueError) as exc:
        log.warning("Could not persist recent file %s: %s", path, exc)
