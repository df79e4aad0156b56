import logging

import pytest

from inkwell.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("INKWELL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("INKWELL_DEBUG", raising=False)


def test_env_level_overrides_preferences(monkeypatch):
    monkeypatch.setenv("INKWELL_LOG_LEVEL", "warning")

    assert logging_utils.apply_preferences(debug_enabled=True) == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch):
    monkeypatch.setenv("INKWELL_DEBUG", "yes")

    assert logging_utils.configure_root() == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.NOTSET


def test_preferences_apply_without_env():
    assert logging_utils.apply_preferences(debug_enabled=False) == logging.INFO
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert logging_utils.apply_preferences(debug_enabled=True) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.parametrize(
    "raw, expected",
    [("15", 15), ("error", logging.ERROR), ("²", logging.INFO), ("loud", logging.INFO)],
)
def test_env_level_values(raw, expected):
    assert logging_utils.env_level({"INKWELL_LOG_LEVEL": raw}) == expected


def test_unparseable_env_level_does_not_break_setup(monkeypatch):
    monkeypatch.setenv("INKWELL_LOG_LEVEL", "²")

    assert logging_utils.configure_root(logging.WARNING) == logging.INFO


def test_no_env_means_no_forced_level():
    assert logging_utils.env_level({}) is None
    assert logging_utils.env_level({"INKWELL_DEBUG": "off"}) is None
