from __future__ import annotations

from tkinter import filedialog
from typing import Optional

from inkwell.domain.ports import FolderPickerPort, PickerOptions, PickerResult


class TkFolderPicker(FolderPickerPort):
    """Native directory chooser via ``tkinter.filedialog``.

    Tk's chooser is directory-only and single-selection already; it returns
    an empty string on cancel, which the gateway maps to None.
    """

    def __init__(self, parent=None, *, title: str = "Open Folder", initial_dir: Optional[str] = None) -> None:
        self.parent = parent
        self.title = title
        self.initial_dir = initial_dir

    def pick(self, options: PickerOptions) -> PickerResult:
        kwargs = {"title": self.title, "mustexist": True}
        if self.parent is not None:
            kwargs["parent"] = self.parent
        if self.initial_dir:
            kwargs["initialdir"] = self.initial_dir
        selected = filedialog.askdirectory(**kwargs)
        if selected:
            self.initial_dir = selected
        return selected
