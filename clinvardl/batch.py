"""Splitting a result set into fixed-size batches."""

from __future__ import annotations

from dataclasses import dataclass, field

from clinvardl.errors import CategorizedError, ErrorKind


@dataclass
class BatchInfo:
    """One batch of records: its number (from 1), first record and size."""

    batch_num: int
    start: int
    size: int
    err_msg: str = ""


@dataclass
class Batch:
    """The total number of batches and the description of each."""

    batches: int
    batch_infos: list[BatchInfo] = field(default_factory=list)


def new_batch(total_count: int, batch_size: int) -> Batch:
    """Split ``total_count`` records into batches of at most ``batch_size``."""
    if batch_size <= 0:
        raise CategorizedError(ErrorKind.INVALID_BATCH_SIZE, f"batch size must be positive, got {batch_size}")
    if total_count < 0:
        raise CategorizedError(ErrorKind.INVALID_PARAMETER, f"total count must not be negative, got {total_count}")

    infos = [
        BatchInfo(
            batch_num=number,
            start=start,
            size=min(batch_size, total_count - start),
        )
        for number, start in enumerate(range(0, total_count, batch_size), start=1)
    ]
    return Batch(batches=len(infos), batch_infos=infos)