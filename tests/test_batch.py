import pytest

from clinvardl.batch import Batch, BatchInfo, new_batch
from clinvardl.errors import CategorizedError, ErrorKind


@pytest.mark.parametrize(
    ("total", "size"),
    [(10, 3), (9, 3), (1, 500), (500, 500), (1001, 500), (7, 1)],
)
def test_batches_cover_all_records(total, size):
    batch = new_batch(total, size)
    assert batch.batches == len(batch.batch_infos)
    assert sum(info.size for info in batch.batch_infos) == total
    assert all(0 < info.size <= size for info in batch.batch_infos)


@pytest.mark.parametrize(("total", "size"), [(10, 3), (1001, 500), (4, 2)])
def test_batches_are_contiguous_and_numbered(total, size):
    infos = new_batch(total, size).batch_infos
    assert infos[0].start == 0
    assert [info.batch_num for info in infos] == list(range(1, len(infos) + 1))
    for previous, current in zip(infos, infos[1:]):
        assert current.start == previous.start + previous.size


def test_last_batch_holds_remainder():
    batch = new_batch(10, 3)
    assert batch.batch_infos[-1] == BatchInfo(batch_num=4, start=9, size=1)


def test_only_last_batch_may_be_short():
    infos = new_batch(1001, 500).batch_infos
    assert all(info.size == 500 for info in infos[:-1])


def test_zero_records_gives_no_batches():
    assert new_batch(0, 5) == Batch(batches=0, batch_infos=[])


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_batch_size_raises(size):
    with pytest.raises(CategorizedError) as info:
        new_batch(10, size)
    assert info.value.kind is ErrorKind.INVALID_BATCH_SIZE


def test_negative_total_raises():
    with pytest.raises(CategorizedError) as info:
        new_batch(-5, 3)
    assert info.value.kind is ErrorKind.INVALID_PARAMETER


def test_batch_info_has_empty_error_by_default():
    assert BatchInfo(batch_num=1, start=0, size=5).err_msg == ""