import json
import logging

from inkwell.adapters.storage_local import StorageLocal


def test_items_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    storage.set_item("recentFiles", '["/a"]')
    storage.set_item("theme", "dark")

    assert storage.get_item("recentFiles") == '["/a"]'
    assert storage.get_item("theme") == "dark"
    with (tmp_path / "local_storage.json").open("r", encoding="utf-8") as fh:
        assert json.load(fh) == {"recentFiles": '["/a"]', "theme": "dark"}


def test_missing_item_is_none(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    assert storage.get_item("recentFiles") is None


def test_corrupt_items_file_reads_empty_and_is_replaced(tmp_path, caplog):
    (tmp_path / "local_storage.json").write_text("{broken", encoding="utf-8")
    storage = StorageLocal(root_dir=str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="inkwell.adapters.storage_local"):
        assert storage.get_item("theme") is None
        storage.set_item("theme", "dark")

    assert "local_storage.json" in caplog.text
    with (tmp_path / "local_storage.json").open("r", encoding="utf-8") as fh:
        assert json.load(fh) == {"theme": "dark"}


def test_creates_root_dir_on_write(tmp_path):
    root = tmp_path / "nested" / "dir"
    storage = StorageLocal(root_dir=str(root))

    storage.set_item("k", "v")

    assert (root / "local_storage.json").exists()


def test_user_settings_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    payload = {"host_url": "http://localhost:7420", "request_timeout_s": 5, "autosave_enabled": True}

    storage.save_user_settings(payload)

    assert storage.load_user_settings() == payload


def test_load_user_settings_missing_file_returns_none(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    assert storage.load_user_settings() is None
