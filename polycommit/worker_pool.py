import concurrent.futures
import logging

import psutil


def default_workers():
    return psutil.cpu_count(logical=False) or 1


def index_ranges(n, workers):
    """ Split [0, n) into at most `workers` contiguous (start, stop) ranges
    whose sizes differ by at most one.
    e.g. index_ranges(10, 3) => [(0, 4), (4, 7), (7, 10)]
         index_ranges(0, 3) => []
    """
    assert workers > 0, "need at least one worker"
    workers = min(workers, n)
    if workers == 0:
        return []
    size, extra = divmod(n, workers)
    ranges = []
    start = 0
    for w in range(workers):
        stop = start + size + (1 if w < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def run_ranges(func, n, workers=None):
    """ Run `func(start, stop)` for every range of index_ranges(n, workers)
    and wait for all of them. Each call must only write to the output
    slots of its own range. Exceptions raised by a worker propagate.
    """
    if workers is None:
        workers = default_workers()
    ranges = index_ranges(n, workers)
    if len(ranges) <= 1:
        for start, stop in ranges:
            func(start, stop)
        return

    logging.debug(f'Fanning {n} items out to {len(ranges)} workers')
    with concurrent.futures.ThreadPoolExecutor(max_workers=len(ranges)) as executor:
        futures = [executor.submit(func, start, stop) for start, stop in ranges]
        for future in futures:
            future.result()


def parallel_map(func, items, workers=None):
    """ Elementwise map over `items` using run_ranges, preserving order. """
    out = [None] * len(items)

    def _work(start, stop):
        for i in range(start, stop):
            out[i] = func(items[i])

    run_ranges(_work, len(items), workers)
    return out
