from __future__ import annotations
import json, logging, os
from typing import Any, Dict, Optional
from inkwell.domain.ports import KeyValueStorePort

log = logging.getLogger(__name__)


class StorageLocal(KeyValueStorePort):
    """Local filesystem storage for key/value items and user settings (JSON)."""

    ITEMS_FILE = "local_storage.json"
    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    # ---- Key/value items (one flat JSON object of strings) ----
    def get_item(self, key: str) -> Optional[str]:
        value = self._load_items().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._load_items()
        items[key] = str(value)
        self._write_json(self.ITEMS_FILE, items)

    def _load_items(self) -> Dict[str, Any]:
        # An unreadable items file is treated as empty; the next write replaces it.
        try:
            data = self._read_json(self.ITEMS_FILE)
        except (OSError, ValueError) as exc:
            log.warning("Discarding unreadable %s: %s", self.ITEMS_FILE, exc)
            return {}
        return data if isinstance(data, dict) else {}

    # ---- User settings (JSON) ----
    def save_user_settings(self, settings: Dict) -> None:
        self._write_json(self.SETTINGS_FILE, settings)

    def load_user_settings(self) -> Optional[Dict]:
        data = self._read_json(self.SETTINGS_FILE)
        return data if isinstance(data, dict) else None

    # ---- Helpers ----
    def _read_json(self, name: str) -> Any:
        path = os.path.join(self.root, name)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write_json(self, name: str, payload: Any) -> None:
        os.makedirs(self.root, exist_ok=True)
        path = os.path.join(self.root, name)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
