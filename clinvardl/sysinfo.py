"""Facts about the running system."""

from __future__ import annotations

import os
import re
import sys

from clinvardl.editor import DarwinEditor, Editor, LinuxEditor, WindowsEditor


def system_name() -> str:
    """Return the operating system name: 'linux', 'darwin', 'windows' or another short name."""
    platform = sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "darwin"
    if platform in ("win32", "cygwin"):
        return "windows"
    return re.sub(r"\d+$", "", platform)


def is_root() -> bool:
    """True on Windows, otherwise whether the effective user is root."""
    if system_name() == "windows":
        return True
    return os.geteuid() == 0


def default_editor() -> Editor:
    """Return the default editor for this system."""
    name = system_name()
    editors = {"linux": LinuxEditor, "darwin": DarwinEditor, "windows": WindowsEditor}
    if name not in editors:
        raise OSError(f"unsupported operating system: {name}")
    return editors[name]()