"""Root logger setup for the editor process.

The effective level is taken from, in order: ``INKWELL_LOG_LEVEL`` (a level
name such as ``warning`` or a number), a truthy ``INKWELL_DEBUG`` (DEBUG),
then the caller's default or the user's debug preference.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
ENV_LOG_LEVEL = "INKWELL_LOG_LEVEL"
ENV_DEBUG = "INKWELL_DEBUG"

# requests logs through urllib3, one line per connection at DEBUG.
_TRANSPORT_LOGGERS = ("urllib3",)


def parse_level(value: int | str | None, fallback: int) -> int:
    """Return a numeric level for ``value``; unknown names give ``fallback``."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    try:
        return int(text)
    except ValueError:
        pass
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def env_level(env: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if env is None else env
    raw = (env.get(ENV_LOG_LEVEL) or "").strip()
    if raw:
        return parse_level(raw, logging.INFO)
    flag = (env.get(ENV_DEBUG) or "").strip().lower()
    if flag in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Install the compact root handler once and set the effective level."""
    level = env_level()
    if level is None:
        level = parse_level(default_level, logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.setLevel(level)
    _tune_transport_loggers(level)
    return level


def apply_preferences(debug_enabled: bool) -> int:
    """Apply the user's debug preference unless the environment forces a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    _tune_transport_loggers(level)
    return level


def _tune_transport_loggers(level: int) -> None:
    transport_level = logging.NOTSET if level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
