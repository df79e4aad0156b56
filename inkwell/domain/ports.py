from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union

PathStr = str
OperationName = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


@dataclass(frozen=True)
class PickerOptions:
    """Native folder picker configuration."""

    directory: bool = True
    multiple: bool = False
    recursive: bool = True


PickerResult = Union[None, str, Sequence[str]]


# ---- Ports (Hexagonal boundaries) ----
class BridgePort(Protocol):
    """Remote-call primitive that reaches the host process."""

    async def call(self, operation: OperationName, args: Mapping[str, Any]) -> Any: ...


class FolderPickerPort(Protocol):
    """Native folder picker. Returns a path, a list of paths, or None."""

    def pick(self, options: PickerOptions) -> PickerResult: ...


class WorkspacePort(Protocol):
    """Typed file/workspace operations executed by the host."""

    async def read_file(self, path: PathStr) -> str: ...
    async def write_file(self, path: PathStr, content: str) -> None: ...
    async def list_dir(self, path: PathStr) -> List[str]: ...
    async def set_workspace(self, path: PathStr) -> None: ...
    async def open_folder(self) -> Optional[PathStr]: ...
    async def create_dir(self, path: PathStr) -> None: ...
    async def delete_node(self, path: PathStr) -> None: ...


class KeyValueStorePort(Protocol):
    """Durable string key/value storage (localStorage-like)."""

    def get_item(self, key: str) -> Optional[str]: ...
    def set_item(self, key: str, value: str) -> None: ...


class RecentsPort(Protocol):
    """Most-recently-used list of file paths."""

    def get_recent_files(self) -> List[PathStr]: ...
    def add_to_recents(self, path: PathStr) -> List[PathStr]: ...
