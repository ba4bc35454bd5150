"""Run-wide statistics over all queries."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from clinvardl import logcdl
from clinvardl.batch import Batch


@dataclass
class Stats:
    """Counts of queries and records, with details of failures.

    Fully successful queries bump ``completed_queries``; partly successful ones are
    recorded in ``partial_failures``; failed ones in ``failed_queries``.
    """

    total_queries: int = 0
    completed_queries: int = 0
    total_records: int = 0
    processed_records: int = 0
    failed_queries: dict[str, BaseException] = field(default_factory=dict)
    partial_failures: dict[str, Batch] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def add_partial_failures(self, query_id: str, failed_batches: Batch) -> None:
        with self._lock:
            self.partial_failures[query_id] = failed_batches

    def add_failed_query(self, query_id: str, err: BaseException) -> None:
        with self._lock:
            self.failed_queries[query_id] = err

    def set_total_queries(self, count: int) -> None:
        self.total_queries = count

    def add_total_records(self, count: int) -> None:
        with self._lock:
            self.total_records += count

    def add_processed_records(self, count: int) -> None:
        with self._lock:
            self.processed_records += count

    def add_completed_query(self) -> None:
        with self._lock:
            self.completed_queries += 1

    def print_summary(self) -> None:
        """Log the counters and the details of partial and total failures."""
        with self._lock:
            partial = list(self.partial_failures.items())
            failed = list(self.failed_queries.items())

        logcdl.info("query statistics:")
        logcdl.info("- total queries: %d", self.total_queries)
        logcdl.info("- completed queries: %d", self.completed_queries)
        logcdl.info("- total records: %d", self.total_records)
        logcdl.info("- records processed: %d", self.processed_records)

        if partial:
            logcdl.warn("queries with missing batches:")
        for query_id, batch in partial:
            logcdl.warn("  - query '%v':", query_id)
            for info in batch.batch_infos:
                logcdl.warn(
                    "    - failed batch %d/%d: (start=%d, size=%d)",
                    info.batch_num,
                    batch.batches,
                    info.start,
                    info.size,
                )

        if failed:
            logcdl.warn("failed queries details:")
        for query_id, err in failed:
            logcdl.warn("  - query '%v': %v", query_id, err)

    def all_queries_failed(self) -> bool:
        """True when every query is recorded as failed."""
        with self._lock:
            return len(self.failed_queries) == self.total_queries