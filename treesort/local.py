import argparse
import sys
import threading
import time

from treesort.config import add_common_arguments, format_result, resolve_size
from treesort.errors import TreeSortError
from treesort.exchange import run_worker
from treesort.local_sort import get_sorter
from treesort.topology import validate
from treesort.transport import LocalHub


def run_local(workers, root_len, sorter="bubble", verbose=False, even_split=False):
    """Sort ``root_len`` elements with one thread per tree node.

    A worker that fails leaves its ancestors blocked; the failure is
    re-raised here once the remaining threads have been given up on.
    """
    validate(workers, root_len, even_split)
    if isinstance(sorter, str):
        sorter = get_sorter(sorter)

    hub = LocalHub(workers)
    results = [None] * workers
    errors = []
    failed = threading.Event()

    def worker(rank):
        try:
            results[rank] = run_worker(hub.endpoint(rank), root_len, sorter, verbose)
        except Exception as exc:
            errors.append(exc)
            failed.set()

    threads = []
    for rank in range(workers):
        t = threading.Thread(target=worker, args=(rank,), name=f"treesort-{rank}", daemon=True)
        threads.append(t)
        t.start()

    # Root finishes last; stop waiting as soon as any worker fails
    while threads[0].is_alive() and not failed.is_set():
        threads[0].join(timeout=0.05)
    if errors:
        raise errors[0]
    for t in threads:
        t.join()
    return results[0]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Tree sort with one thread per worker')
    parser.add_argument('--workers', type=int, default=3,
                        help='Number of workers, must be odd')
    add_common_arguments(parser, sorter='library')
    args = parser.parse_args(argv)
    size = resolve_size(args)

    start_time = time.perf_counter()
    try:
        sorted_data = run_local(args.workers, size, args.sorter, args.verbose, args.even_split)
    except TreeSortError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    duration = time.perf_counter() - start_time

    if args.debug:
        print(sorted_data.tolist())
    print(format_result(sorted_data))
    print(f"Time taken: {duration:.6f} seconds")
    return 0


if __name__ == '__main__':
    sys.exit(main())
