"""Adapter and use-case wiring for the editor runtime.

This module builds the bridge binding, workspace gateway, storage and use
cases from an :class:`inkwell.app.config.AppConfig`. The transport strategy
is fixed here at construction; the binding resolves it on first call.
"""

from __future__ import annotations

from typing import Optional

from ..adapters.bridge_binding import BridgeBinding, TransportResolver, resolve_transport
from ..adapters.headless import NullFolderPicker
from ..adapters.recents_store import RecentsStore
from ..adapters.storage_local import StorageLocal
from ..adapters.workspace_gateway import WorkspaceGateway
from ..domain.ports import FolderPickerPort, KeyValueStorePort
from ..usecases.create_file import CreateFile
from ..usecases.create_folder import CreateFolder
from ..usecases.delete_node import DeleteNode
from ..usecases.list_workspace import ListWorkspace
from ..usecases.open_file import OpenFile
from ..usecases.open_workspace import OpenWorkspace
from ..usecases.save_file import SaveFile
from ..utils import logging as logging_utils
from .config import AppConfig, load_config, save_config


class AppServices:
    """Hold the runtime adapters and use cases for one hosting view.

    Call chain:
        The view's bootstrap creates one instance and hands it to
        ``EditorController``; tests pass a fake ``resolver``/``picker``/
        ``storage`` to avoid network, dialogs and the home directory.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        resolver: Optional[TransportResolver] = None,
        picker: Optional[FolderPickerPort] = None,
        storage: Optional[KeyValueStorePort] = None,
        settings_storage: Optional[StorageLocal] = None,
    ) -> None:
        self.config = config
        self.settings_storage = settings_storage
        self.bridge = BridgeBinding(resolver or self._default_resolver)
        self.storage = storage or StorageLocal(root_dir=config.storage_dir)
        self.recents = RecentsStore(self.storage)
        self.workspace = WorkspaceGateway(self.bridge, picker or NullFolderPicker())

        self.uc_open_file = OpenFile(self.workspace, self.recents)
        self.uc_save_file = SaveFile(self.workspace, self.recents)
        self.uc_create_file = CreateFile(self.workspace)
        self.uc_create_folder = CreateFolder(self.workspace)
        self.uc_delete_node = DeleteNode(self.workspace)
        self.uc_open_workspace = OpenWorkspace(self.workspace)
        self.uc_list_workspace = ListWorkspace(self.workspace)

    def save_preferences(self, *, preview_enabled: bool, autosave_enabled: bool) -> None:
        """Update toggle preferences; persisted only when settings storage is set."""
        self.config.preview_enabled = preview_enabled
        self.config.autosave_enabled = autosave_enabled
        if self.settings_storage is not None:
            save_config(self.config, self.settings_storage)

    def _default_resolver(self):
        return resolve_transport(
            self.config.host_url,
            api_key=self.config.api_key,
            request_timeout_s=self.config.request_timeout_s,
        )


def build_services(
    config: Optional[AppConfig] = None,
    *,
    picker: Optional[FolderPickerPort] = None,
) -> AppServices:
    """Configure logging and wire services for a hosting view.

    Args:
        config: Effective configuration; loaded from settings/env if omitted.
        picker: Folder picker; headless stub if omitted.
    """
    logging_utils.configure_root()
    config = config or load_config()
    logging_utils.apply_preferences(config.debug_logging)
    return AppServices(
        config,
        picker=picker,
        settings_storage=StorageLocal(root_dir=config.storage_dir),
    )


__all__ = ["AppServices", "build_services"]
