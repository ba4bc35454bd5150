"""The text editor to open files with, taken from $EDITOR or a per-system default."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class Editor:
    """An editor's short name and the path used to start it."""

    name: str = ""
    path: str = ""

    @classmethod
    def from_env(cls) -> Editor:
        """Read the editor named by the EDITOR environment variable."""
        command = os.environ.get("EDITOR", "")
        name = PurePath(command).name if command else ""
        return cls(name=name, path=command)

    def info(self) -> Editor:
        """Return the editor from EDITOR, or this one when EDITOR is unusable."""
        chosen = Editor.from_env()
        if not chosen.name or not chosen.path:
            return Editor(name=self.name, path=self.path)
        return Editor(name=chosen.name, path=chosen.path)


@dataclass(frozen=True)
class LinuxEditor(Editor):
    """Default editor on Linux."""

    name: str = "vi"
    path: str = "/usr/bin/vi"


@dataclass(frozen=True)
class DarwinEditor(Editor):
    """Default editor on macOS."""

    name: str = "open"
    path: str = "/usr/bin/open"


@dataclass(frozen=True)
class WindowsEditor(Editor):
    """Default editor on Windows."""

    name: str = "notepad"
    path: str = "C:\\Windows\\System32\\notepad.exe"