"""Error types raised while talking to the Entrez utilities."""

from __future__ import annotations

import errno
import socket
from collections.abc import Iterator
from enum import Enum
from typing import Any

import requests


class EntrezError(Exception):
    """Base class of every error raised by this package."""


class ErrorKind(Enum):
    """Categories of errors that are never retried."""

    INPUT = "input error"
    URL = "url error"
    PARSE = "parse error"
    SAVE_RESULT = "save result error"
    INVALID_BATCH_SIZE = "invalid batch size"
    RATE_LIMIT = "rate limit exceeded"
    FAILED_OPEN_FILE = "open file error"
    INVALID_PARAMETER = "invalid parameter"
    RETRY_FAILED = "retry failed"


class CategorizedError(EntrezError):
    """A non-retryable error of a known kind with extra context."""

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        self.kind = kind
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"{self.message}: {self.kind.value}"
        return self.kind.value


class RetryableError(EntrezError):
    """An error that may be worth retrying."""

    def should_retry(self) -> bool:
        return True


class EmptyResultError(RetryableError):
    """The server returned nothing useful."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def should_retry(self) -> bool:
        return True


_STATUS_MESSAGES = {
    500: "internal server error",
    501: "not implemented",
    502: "bad gateway",
    503: "service unavailable",
    504: "gateway timeout",
    505: "HTTP version not supported",
    429: "too many requests",
    408: "request timeout",
}


class HTTPError(RetryableError):
    """An HTTP-level failure carrying a status code."""

    def __init__(self, message: str = "HTTP request failed", status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(str(self))

    @classmethod
    def from_status(cls, code: int) -> HTTPError:
        """Build an error from a status code, choosing a matching message."""
        if code in _STATUS_MESSAGES:
            message = _STATUS_MESSAGES[code]
        elif code >= 500:
            message = "server error"
        elif code >= 400:
            message = "client error"
        else:
            message = "HTTP request failed"
        return cls(message, code)

    @classmethod
    def from_message(cls, message: str) -> HTTPError:
        """Build an error from a transport message, inferring the status code."""
        if "timeout awaiting response headers" in message:
            code = 408
        elif "server sent GOAWAY" in message:
            code = 503
        else:
            code = 500
        return cls(message, code)

    def __str__(self) -> str:
        return f"{self.message} (status code: {self.status_code})"

    def should_retry(self) -> bool:
        code = self.status_code
        return code >= 500 or code in (429, 408, 502, 503, 504)


def _exception_chain(exc: BaseException | None) -> Iterator[BaseException]:
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = exc.__cause__ or exc.__context__


def _message_with_cause(message: str, cause: BaseException | None) -> str:
    if cause is None:
        return message
    return f"{message}: {cause}"


_RETRYABLE_ERRNOS = {
    code
    for name in ("ENETUNREACH", "EHOSTUNREACH", "ENETDOWN", "ECONNABORTED", "ECONNRESET", "ECONNREFUSED", "EPIPE")
    if (code := getattr(errno, name, None)) is not None
}

_RETRYABLE_TYPES: tuple[type[BaseException], ...] = (
    TimeoutError,
    ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.ConnectionError,
)


class NetError(RetryableError):
    """A network failure; retried only for transient causes."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(str(self))
        self.__cause__ = cause

    def __str__(self) -> str:
        return _message_with_cause(self.message, self.cause)

    def should_retry(self) -> bool:
        if self.cause is None:
            return False
        chain = list(_exception_chain(self.cause))
        for exc in chain:
            if isinstance(exc, socket.gaierror):
                temporary = getattr(socket, "EAI_AGAIN", None)
                return temporary is not None and exc.errno == temporary
        for exc in chain:
            if isinstance(exc, _RETRYABLE_TYPES):
                return True
            if isinstance(exc, OSError) and exc.errno in _RETRYABLE_ERRNOS:
                return True
        return False


class ParametersError(EntrezError):
    """Invalid parameters were supplied."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class EntrezTimeoutError(RetryableError):
    """An operation ran out of time or was cancelled."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(str(self))
        self.__cause__ = cause

    def __str__(self) -> str:
        return _message_with_cause(self.message, self.cause)

    def should_retry(self) -> bool:
        return True


class BatchError(EntrezError):
    """A failure of one batch of a larger query."""

    def __init__(
        self,
        batch_num: int,
        batches: int,
        start: int,
        size: int,
        query: Any,
        err: BaseException | None,
    ) -> None:
        self.batch_num = batch_num
        self.batches = batches
        self.start = start
        self.size = size
        self.query = query
        self.err = err
        super().__init__(str(self))
        self.__cause__ = err

    def __str__(self) -> str:
        return f"batch {self.batch_num}/{self.batches} (start={self.start}) failed: {self.err}"