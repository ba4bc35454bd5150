import threading

import pytest

from clinvardl import logcdl
from clinvardl.batch import Batch, BatchInfo
from clinvardl.errors import EmptyResultError
from clinvardl.stats import Stats


@pytest.fixture(autouse=True)
def console_logger():
    logcdl.close()
    yield
    logcdl.close()


def test_counters_accumulate():
    stats = Stats()
    stats.add_total_records(10)
    stats.add_total_records(5)
    stats.add_processed_records(7)
    stats.add_completed_query()
    stats.add_completed_query()
    assert (stats.total_records, stats.processed_records, stats.completed_queries) == (15, 7, 2)


def test_all_queries_failed():
    stats = Stats()
    stats.set_total_queries(2)
    stats.add_failed_query("a", EmptyResultError("x"))
    assert not stats.all_queries_failed()
    stats.add_failed_query("b", EmptyResultError("y"))
    assert stats.all_queries_failed()


def test_failed_query_overwrites_same_id():
    stats = Stats()
    stats.add_failed_query("a", EmptyResultError("first"))
    stats.add_failed_query("a", EmptyResultError("second"))
    assert list(stats.failed_queries) == ["a"]
    assert str(stats.failed_queries["a"]) == "second"


def test_partial_failures_stored():
    stats = Stats()
    batch = Batch(batches=3, batch_infos=[BatchInfo(batch_num=2, start=10, size=5)])
    stats.add_partial_failures("q2", batch)
    assert stats.partial_failures == {"q2": batch}


def test_print_summary_reports_everything(capsys):
    stats = Stats()
    stats.set_total_queries(2)
    stats.add_completed_query()
    stats.add_total_records(15)
    stats.add_processed_records(10)
    stats.add_partial_failures("q2", Batch(batches=3, batch_infos=[BatchInfo(batch_num=2, start=10, size=5)]))
    stats.add_failed_query("q1", EmptyResultError("boom"))
    stats.print_summary()
    out = capsys.readouterr().out
    assert "- total queries: 2" in out
    assert "- completed queries: 1" in out
    assert "- total records: 15" in out
    assert "- records processed: 10" in out
    assert "queries with missing batches:" in out
    assert "    - failed batch 2/3: (start=10, size=5)" in out
    assert "failed queries details:" in out
    assert "  - query 'q1': boom" in out


def test_print_summary_without_failures_has_no_details(capsys):
    stats = Stats()
    stats.set_total_queries(1)
    stats.print_summary()
    out = capsys.readouterr().out
    assert "- total queries: 1" in out
    assert "failed queries details:" not in out
    assert "queries with missing batches:" not in out


def test_concurrent_counting():
    stats = Stats()

    def work():
        for _ in range(100):
            stats.add_processed_records(2)
            stats.add_completed_query()

    threads = [threading.Thread(target=work) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert stats.processed_records == 6 * 100 * 2
    assert stats.completed_queries == 6 * 100