from __future__ import annotations

import json
import logging
from typing import List

from inkwell.domain.ports import KeyValueStorePort, PathStr, RecentsPort
from inkwell.domain.recents import MAX_RECENTS, bump_recent, coerce_recents

RECENTS_KEY = "recentFiles"

log = logging.getLogger(__name__)


class RecentsStore(RecentsPort):
    """Capped most-recently-used file list persisted under ``recentFiles``."""

    def __init__(self, storage: KeyValueStorePort, *, limit: int = MAX_RECENTS) -> None:
        self.storage = storage
        self.limit = limit

    def get_recent_files(self) -> List[PathStr]:
        """Stored list, most recent first; [] on any read or parse failure."""
        try:
            stored = self.storage.get_item(RECENTS_KEY)
            if not stored:
                return []
            return coerce_recents(json.loads(stored))
        except Exception as exc:
            log.debug("Ignoring unreadable recent files: %s", exc)
            return []

    def add_to_recents(self, path: PathStr) -> List[PathStr]:
        recents = bump_recent(self.get_recent_files(), path, self.limit)
        self.storage.set_item(RECENTS_KEY, json.dumps(recents))
        return recents
