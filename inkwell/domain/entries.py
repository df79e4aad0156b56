"""Directory entries as rendered by the host's ``list_dir``.

The host prefixes every child name with a kind marker followed by a space:
``"📁 src"`` for directories and ``"📝 notes.md"`` for files. Entries without
a known marker are kept as plain file names.
"""

from __future__ import annotations

from dataclasses import dataclass

DIR_MARKER = "\U0001F4C1"  # 📁
FILE_MARKER = "\U0001F4DD"  # 📝


@dataclass(frozen=True)
class DirEntry:
    name: str
    is_dir: bool
    raw: str

    @classmethod
    def parse(cls, raw: str) -> "DirEntry":
        text = str(raw)
        for marker, is_dir in ((DIR_MARKER, True), (FILE_MARKER, False)):
            prefix = f"{marker} "
            if text.startswith(prefix):
                return cls(name=text[len(prefix):], is_dir=is_dir, raw=text)
        return cls(name=text, is_dir=False, raw=text)

    def join(self, parent: str) -> str:
        """Path of this entry below ``parent`` (host-relative, "/" separated)."""
        base = (parent or "").rstrip("/")
        return f"{base}/{self.name}" if base else self.name


__all__ = ["DIR_MARKER", "FILE_MARKER", "DirEntry"]
