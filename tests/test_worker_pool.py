from pytest import mark, raises

from polycommit.worker_pool import index_ranges, parallel_map, run_ranges


@mark.parametrize("n, workers", [(10, 3), (7, 7), (3, 8), (100, 4), (1, 1)])
def test_index_ranges_cover_everything(n, workers):
    ranges = index_ranges(n, workers)
    assert len(ranges) == min(n, workers)
    assert ranges[0][0] == 0
    assert ranges[-1][1] == n
    for (_, stop), (start, _) in zip(ranges, ranges[1:]):
        assert stop == start
    sizes = [stop - start for start, stop in ranges]
    assert max(sizes) - min(sizes) <= 1


def test_index_ranges_empty():
    assert index_ranges(0, 4) == []
    assert index_ranges(10, 3) == [(0, 4), (4, 7), (7, 10)]


def test_run_ranges_writes_every_slot():
    out = [None] * 50

    def _work(start, stop):
        for i in range(start, stop):
            out[i] = i * i

    run_ranges(_work, len(out), workers=4)
    assert out == [i * i for i in range(50)]


def test_run_ranges_propagates_exceptions():
    def _work(start, stop):
        if start > 0:
            raise RuntimeError("boom")

    with raises(RuntimeError):
        run_ranges(_work, 10, workers=2)


def test_parallel_map_preserves_order():
    items = list(range(20))
    assert parallel_map(lambda x: x + 1, items, workers=3) == list(range(1, 21))
    assert parallel_map(lambda x: x, [], workers=3) == []
