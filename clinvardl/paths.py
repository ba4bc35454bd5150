"""Directory helpers: creating, backing up and normalising paths."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from clinvardl import logcdl

_BACKUP_STAMP = "%Y-%m-%d_%H-%M-%S"


def check_dir(directory: str | os.PathLike[str]) -> None:
    """Create the directory (not its parents) if it does not exist."""
    target = Path(directory)
    if target.exists():
        return
    try:
        target.mkdir(mode=0o755)
    except OSError as exc:
        logcdl.error("failed to create directory: %v", exc)


def backup(src_dir: str | os.PathLike[str]) -> Path:
    """Move every file under ``src_dir`` into a timestamped folder in ``<parent>/backup``.

    Returns the backup folder. Stops at the first failure, which is logged.
    """
    src = Path(src_dir)
    dst = src.parent / "backup" / (src.name + datetime.now().strftime(_BACKUP_STAMP))

    if not src.exists():
        logcdl.error("error walking the path %q: %v", str(src), f"no such file or directory: {src}")
        return dst

    def on_error(exc: OSError) -> None:
        logcdl.error("error accessing path %q: %v", exc.filename, exc)

    try:
        for root, dirs, files in os.walk(src, onerror=on_error):
            dirs.sort()
            for file_name in sorted(files):
                path = Path(root) / file_name
                dst_path = dst / path.relative_to(src)
                try:
                    dst_path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
                except OSError as exc:
                    logcdl.error("error creating directory for %q: %v", str(dst_path), exc)
                    raise
                logcdl.info("moving %s to %s", str(path), str(dst_path))
                try:
                    os.replace(path, dst_path)
                except OSError as exc:
                    logcdl.error("error moving file %q to %q: %v", str(path), str(dst_path), exc)
                    raise
    except OSError as exc:
        logcdl.error("error walking the path %q: %v", str(src), exc)
    return dst


def normalize_path(path: str) -> str:
    """Expand a leading '~/' or './' and use the system's path separator."""
    if path.startswith("~/"):
        path = os.path.normpath(os.path.join(str(Path.home()), path[2:]))
    if path.startswith("./"):
        path = os.path.normpath(os.path.join(os.getcwd(), path[2:]))
    if os.sep == "\\":
        return path.replace("/", "\\")
    return path