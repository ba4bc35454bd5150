"""Small numeric helpers."""


def get_worker_count(max_workers: int, task_count: int) -> int:
    """Return how many workers to start: never more than there are tasks."""
    return min(max_workers, task_count)