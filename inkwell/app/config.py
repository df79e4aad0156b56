"""Runtime configuration for the interaction layer.

Values are layered: dataclass defaults, then the persisted user settings
(``user_settings.json`` via ``StorageLocal``), then environment overrides.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from ..adapters.storage_local import StorageLocal

DEFAULT_STORAGE_DIR = os.path.join(os.path.expanduser("~"), ".inkwell")

ENV_HOST_URL = "INKWELL_HOST_URL"
ENV_API_KEY = "INKWELL_API_KEY"
ENV_REQUEST_TIMEOUT = "INKWELL_REQUEST_TIMEOUT_S"
ENV_STORAGE_DIR = "INKWELL_STORAGE_DIR"

log = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Typed runtime settings that persist via StorageLocal."""

    host_url: str = ""
    api_key: str = ""
    request_timeout_s: int = 10
    storage_dir: str = DEFAULT_STORAGE_DIR
    autosave_enabled: bool = False
    preview_enabled: bool = False
    debug_logging: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply known keys from ``payload``; unknown keys are ignored."""
        for item in fields(self):
            if item.name not in payload:
                continue
            current = getattr(self, item.name)
            value = payload[item.name]
            if isinstance(current, bool):
                setattr(self, item.name, _coerce_bool(value))
            elif isinstance(current, int):
                setattr(self, item.name, _coerce_int(item.name, value, current))
            else:
                setattr(self, item.name, "" if value is None else str(value).strip())


def load_config(
    storage: Optional[StorageLocal] = None,
    env: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Build the effective configuration.

    Args:
        storage: Settings storage; defaults to ``StorageLocal`` rooted at the
            configured storage directory.
        env: Environment mapping; defaults to ``os.environ``.
    """
    env = os.environ if env is None else env
    config = AppConfig()
    storage_dir = (env.get(ENV_STORAGE_DIR) or "").strip()
    if storage_dir:
        config.storage_dir = storage_dir

    storage = storage or StorageLocal(root_dir=config.storage_dir)
    try:
        saved = storage.load_user_settings()
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable user settings in %s: %s", storage.root, exc)
        saved = None
    if saved:
        config.apply_dict(saved)

    overrides: Dict[str, Any] = {}
    if env.get(ENV_HOST_URL):
        overrides["host_url"] = env[ENV_HOST_URL]
    if env.get(ENV_API_KEY):
        overrides["api_key"] = env[ENV_API_KEY]
    if env.get(ENV_REQUEST_TIMEOUT):
        overrides["request_timeout_s"] = env[ENV_REQUEST_TIMEOUT]
    if storage_dir:
        overrides["storage_dir"] = storage_dir
    config.apply_dict(overrides)
    return config


def save_config(config: AppConfig, storage: Optional[StorageLocal] = None) -> None:
    storage = storage or StorageLocal(root_dir=config.storage_dir)
    storage.save_user_settings(config.to_dict())


def _coerce_int(name: str, value: Any, fallback: int) -> int:
    try:
        coerced = int(str(value).strip())
    except (TypeError, ValueError):
        log.warning("Ignoring invalid %s=%r; keeping %s", name, value, fallback)
        return fallback
    if coerced <= 0:
        log.warning("Ignoring non-positive %s=%r; keeping %s", name, value, fallback)
        return fallback
    return coerced


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


__all__ = ["AppConfig", "DEFAULT_STORAGE_DIR", "load_config", "save_config"]
