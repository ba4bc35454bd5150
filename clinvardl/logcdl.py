"""Levelled logger that writes coloured lines to the console and plain lines to a file."""

from __future__ import annotations

import re
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import IO, Any

_RESET = "\033[0m"
_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
_VERB = re.compile(r"%%|%v")


class Level(IntEnum):
    """Log levels, in increasing order."""

    DEBUG = 0
    INFO = 1
    TIP = 2
    WARN = 3
    ERROR = 4
    PANIC = 5
    FATAL = 6
    SUCCESS = 7

    @property
    def prefix(self) -> str:
        return f"[{self.name}]"

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    Level.DEBUG: "\033[36m",
    Level.INFO: "",
    Level.TIP: "\033[34m",
    Level.WARN: "\033[33m",
    Level.ERROR: "\033[31m",
    Level.PANIC: "\033[1;31m",
    Level.FATAL: "\033[1;31m",
    Level.SUCCESS: "\033[32m",
}


@dataclass
class Options:
    """Logger settings."""

    min_level: Level = Level.DEBUG
    log_dir: str = "logs"
    log_file_name: str = "clinvardl_%s.log"
    time_format: str = "%Y-%m-%d"


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    template = _VERB.sub(lambda m: "%%" if m.group(0) == "%%" else "%s", fmt)
    return template % args


class Logger:
    """Writes each message to the console and, if enabled, to a daily log file."""

    def __init__(
        self,
        options: Options | None = None,
        *,
        stream: IO[str] | None = None,
        write_file: bool = True,
    ) -> None:
        self.options = options or Options()
        self.min_level = self.options.min_level
        self._stream = stream
        self._lock = threading.Lock()
        self.log_path: Path | None = None
        self._file: IO[str] | None = None
        if write_file:
            self._open_file()

    def _open_file(self) -> None:
        log_dir = Path.cwd() / self.options.log_dir
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create log directory: {exc}") from exc
        stamp = datetime.now().strftime(self.options.time_format)
        self.log_path = log_dir / (self.options.log_file_name % stamp)
        self._file = self.log_path.open("a", encoding="utf-8")

    def log(self, level: Level, fmt: str, *args: Any) -> None:
        """Write a message at the given level; PANIC raises and FATAL exits."""
        if level < self.min_level:
            return
        message = _format(fmt, args)
        stamp = datetime.now().strftime(_TIMESTAMP_FORMAT)
        if level.color:
            console_line = f"{stamp} {level.color}{level.prefix} {message}{_RESET}\n"
        else:
            console_line = f"{stamp} {level.prefix} {message}\n"
        with self._lock:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(console_line)
            stream.flush()
            if self._file is not None and not self._file.closed:
                self._file.write(f"{stamp} {level.prefix} {message}\n")
                self._file.flush()
        if level is Level.FATAL:
            self.close()
            raise SystemExit(1)
        if level is Level.PANIC:
            self.close()
            raise RuntimeError(message)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(Level.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(Level.INFO, fmt, *args)

    def tip(self, fmt: str, *args: Any) -> None:
        self.log(Level.TIP, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        self.log(Level.WARN, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(Level.ERROR, fmt, *args)

    def panic(self, fmt: str, *args: Any) -> None:
        self.log(Level.PANIC, fmt, *args)

    def fatal(self, fmt: str, *args: Any) -> None:
        self.log(Level.FATAL, fmt, *args)

    def success(self, fmt: str, *args: Any) -> None:
        self.log(Level.SUCCESS, fmt, *args)

    def close(self) -> None:
        """Close the log file, if one is open."""
        with self._lock:
            if self._file is not None and not self._file.closed:
                self._file.close()


_default_logger: Logger | None = None
_init_lock = threading.Lock()


def init_logger(options: Options | None = None) -> Logger:
    """Create the package-wide logger once; later calls return the same one."""
    global _default_logger
    with _init_lock:
        if _default_logger is None:
            _default_logger = Logger(options)
        return _default_logger


def get_logger() -> Logger:
    """Return the package-wide logger, or a console-only one if none was set up."""
    global _default_logger
    with _init_lock:
        if _default_logger is None:
            _default_logger = Logger(write_file=False)
        return _default_logger


def close() -> None:
    """Close the package-wide logger's file and forget it."""
    global _default_logger
    with _init_lock:
        if _default_logger is not None:
            _default_logger.close()
        _default_logger = None


def debug(fmt: str, *args: Any) -> None:
    get_logger().debug(fmt, *args)


def info(fmt: str, *args: Any) -> None:
    get_logger().info(fmt, *args)


def tip(fmt: str, *args: Any) -> None:
    get_logger().tip(fmt, *args)


def warn(fmt: str, *args: Any) -> None:
    get_logger().warn(fmt, *args)


def error(fmt: str, *args: Any) -> None:
    get_logger().error(fmt, *args)


def panic(fmt: str, *args: Any) -> None:
    get_logger().panic(fmt, *args)


def fatal(fmt: str, *args: Any) -> None:
    get_logger().fatal(fmt, *args)


def success(fmt: str, *args: Any) -> None:
    get_logger().success(fmt, *args)