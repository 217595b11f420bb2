import argparse
import os

from treesort.local_sort import SORTERS

# Default with 1.000.000 entries
ROOT_LEN = 1000000
# Debug array with 40 entries
DEBUG_LEN = 40


def default_size():
    return int(os.environ.get("TREESORT_SIZE", ROOT_LEN))


def add_common_arguments(parser: argparse.ArgumentParser, sorter: str = 'bubble') -> argparse.ArgumentParser:
    parser.add_argument('--size', type=int, default=None,
                        help=f'Number of elements to sort (default {ROOT_LEN}, or $TREESORT_SIZE)')
    parser.add_argument('--debug', action='store_true',
                        help=f'Sort {DEBUG_LEN} elements and print the sorted array')
    parser.add_argument('--sorter', choices=sorted(SORTERS), default=sorter,
                        help=f'Sort used at the leaves (default {sorter}); bubble is quadratic '
                             f'and only practical for small sizes or many workers')
    parser.add_argument('--even-split', action='store_true',
                        help='Require the size to split evenly down to the deepest level')
    parser.add_argument('--verbose', action='store_true',
                        help='Print per-worker progress')
    return parser


def resolve_size(args):
    if args.size is not None:
        return args.size
    if args.debug:
        return DEBUG_LEN
    return default_size()


def format_result(values):
    if len(values) == 0:
        return "Result: sorted 0 elements"
    return f"Result: sorted {len(values)} elements, first={values[0]} last={values[-1]}"
