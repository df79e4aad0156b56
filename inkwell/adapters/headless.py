from __future__ import annotations

import logging
from typing import Any, Mapping

from inkwell.domain.ports import BridgePort, FolderPickerPort, OperationName, PickerOptions, PickerResult

log = logging.getLogger(__name__)


class NullBridge(BridgePort):
    """No-op transport used when no host process is attached."""

    async def call(self, operation: OperationName, args: Mapping[str, Any]) -> Any:
        log.warning("No host attached; dropping call to %s", operation)
        return None


class NullFolderPicker(FolderPickerPort):
    """Picker stub for headless runs; behaves like an immediate cancel."""

    def pick(self, options: PickerOptions) -> PickerResult:
        log.info("No folder picker available; treating as cancelled")
        return None
