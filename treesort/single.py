import argparse
import sys
import time

from treesort.buffers import seed
from treesort.config import add_common_arguments, format_result, resolve_size
from treesort.errors import TreeSortError
from treesort.local_sort import get_sorter
from treesort.topology import validate


def run_single(root_len, sorter="bubble"):
    validate(1, root_len)
    if isinstance(sorter, str):
        sorter = get_sorter(sorter)
    values = seed(root_len)
    sorter(values)
    return values


def main(argv=None):
    parser = argparse.ArgumentParser(description='Sequential baseline for the tree sort')
    add_common_arguments(parser, sorter='library')
    args = parser.parse_args(argv)
    size = resolve_size(args)

    start = time.time()
    try:
        sorted_data = run_single(size, args.sorter)
    except TreeSortError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.debug:
        print(sorted_data.tolist())
    print(format_result(sorted_data))
    print(f"Time taken: {time.time() - start:.2f} seconds")
    return 0


if __name__ == '__main__':
    sys.exit(main())
