"""Retrying operations with exponential backoff and jitter."""

from __future__ import annotations

import random
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from clinvardl import logcdl
from clinvardl.errors import EntrezTimeoutError, RetryableError

T = TypeVar("T")


@dataclass
class RetryConfig:
    """How often and how long to wait between attempts; delays are in seconds."""

    max_retries: int = 5
    base_delay: float = 2.0
    max_delay: float = 10.0
    multiplier: float = 1.5
    randomization_factor: float = 0.2


def default_config() -> RetryConfig:
    """Return the standard retry settings."""
    return RetryConfig()


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """Seconds to wait after the given failed attempt (counting from 1)."""
    delay = config.base_delay * config.multiplier ** (attempt - 1)
    delay = min(delay, config.max_delay)
    if config.randomization_factor > 0:
        delta = config.randomization_factor * delay
        delay = random.uniform(delay - delta, delay + delta)
    return delay


def _chain(err: BaseException):
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def should_retry(err: BaseException | None) -> bool:
    """Decide whether a failure is worth another attempt."""
    if err is None:
        return False
    chain = list(_chain(err))
    if any(isinstance(exc, TimeoutError) for exc in chain):
        return True
    for exc in chain:
        if isinstance(exc, RetryableError):
            return exc.should_retry()
    return False


def _cancelled_error(operation: str) -> EntrezTimeoutError:
    return EntrezTimeoutError(f"{operation} cancelled")


def do_with_retry(
    operation: str,
    config: RetryConfig,
    fn: Callable[[], T],
    cancelled: threading.Event | None = None,
) -> T | None:
    """Call ``fn`` until it succeeds, a non-retryable error occurs or attempts run out.

    ``cancelled``, when set, stops the loop and raises ``EntrezTimeoutError``.
    """
    for attempt in range(1, config.max_retries + 1):
        if cancelled is not None and cancelled.is_set():
            raise _cancelled_error(operation)
        try:
            result = fn()
        except Exception as exc:
            if not should_retry(exc):
                logcdl.warn("%s failed with non-retryable error: %v", operation, exc)
                raise
            if attempt == config.max_retries:
                logcdl.warn("attempt %d/%d for %s failed: %v", attempt, config.max_retries, operation, exc)
                raise
            delay = calculate_delay(attempt, config)
            logcdl.warn(
                "attempt %d/%d for %s failed: %v, retrying in %v",
                attempt,
                config.max_retries,
                operation,
                exc,
                f"{delay:.3f}s",
            )
            if cancelled is not None:
                if cancelled.wait(delay):
                    raise _cancelled_error(operation) from exc
            else:
                time.sleep(delay)
            continue
        if attempt > 1:
            logcdl.success("%s succeeded after %d attempts", operation, attempt)
        return result
    return None