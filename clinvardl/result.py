"""Progress and outcome of a single query."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from clinvardl.batch import BatchInfo
from clinvardl.models import ESummaryResult


class QueryStatus(str, Enum):
    """Outcome of a query."""

    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass
class QueryResult:
    """Statistics and result of one query; mutations are thread-safe."""

    query_id: str
    query: str
    total_records: int = 0
    processed_count: int = 0
    status: QueryStatus = QueryStatus.FAILED
    failed_batches: list[BatchInfo] = field(default_factory=list)
    total_batches: int = 0
    error: BaseException | None = None
    created_at: datetime = field(default_factory=datetime.now)
    end_time: datetime | None = None
    duration: str = "0s"
    progress: str = "0.00%"
    result: ESummaryResult | None = None
    last_query_has_filters: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.end_time is None:
            self.end_time = self.created_at

    def set_total_records(self, count: int) -> None:
        with self._lock:
            self.total_records = count

    def set_total_batches(self, count: int) -> None:
        with self._lock:
            self.total_batches = count

    def add_processed_records(self, count: int) -> None:
        with self._lock:
            self.processed_count += count

    def add_failed_batch(self, batch_info: BatchInfo) -> None:
        """Record a failed batch unless one with the same start is already recorded."""
        with self._lock:
            if any(batch.start == batch_info.start for batch in self.failed_batches):
                return
            self.failed_batches.append(batch_info)

    def remove_failed_batch(self, start: int) -> None:
        """Forget the failed batch that begins at ``start``, if any."""
        with self._lock:
            for index, batch in enumerate(self.failed_batches):
                if batch.start == start:
                    del self.failed_batches[index]
                    break

    def is_complete(self) -> bool:
        return self.total_records == self.processed_count

    def progress_percent(self) -> float:
        """Percentage of records fetched."""
        if self.processed_count == 0 or self.total_records == 0:
            return 0.0
        if self.processed_count == self.total_records:
            return 100.0
        return self.processed_count / self.total_records * 100

    def progress_string(self) -> str:
        return f"{self.progress_percent():.2f}%"

    def query_time(self) -> float:
        """Seconds between creation and the end time."""
        end = self.end_time if self.end_time is not None else self.created_at
        return (end - self.created_at).total_seconds()

    def query_time_string(self) -> str:
        return f"{self.query_time():.2f}s"

    def query_status(self) -> QueryStatus:
        """Status implied by the progress."""
        progress = self.progress_percent()
        if progress == 0:
            return QueryStatus.FAILED
        if progress == 100:
            return QueryStatus.SUCCESS
        return QueryStatus.PARTIAL

    def _update_basic(self, has_filters: bool) -> None:
        self.end_time = datetime.now()
        self.duration = self.query_time_string()
        self.progress = self.progress_string()
        self.last_query_has_filters = has_filters

    def set_status_on_error(self, err: BaseException | None, has_filters: bool) -> None:
        """Mark the query as failed with ``err`` and drop any partial result."""
        with self._lock:
            self.processed_count = 0
            self.status = QueryStatus.FAILED
            self.error = err
            self.result = None
            self._update_basic(has_filters)

    def update_basic_status(self, has_filters: bool) -> None:
        """Stamp the end time and derive progress and status."""
        with self._lock:
            self._update_basic(has_filters)
            self.status = self.query_status()