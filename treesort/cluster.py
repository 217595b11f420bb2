import argparse
import os
import sys

os.environ["OMP_NUM_THREADS"] = "1"

from mpi4py import MPI

from treesort.config import add_common_arguments, format_result, resolve_size
from treesort.errors import TreeSortError
from treesort.exchange import run_worker
from treesort.local_sort import get_sorter
from treesort.mpi import MPITransport
from treesort.topology import validate


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Tree sort over MPI, run with an odd number of processes, '
                    'e.g. mpiexec -n 7 treesort-cluster')
    add_common_arguments(parser)
    args = parser.parse_args(argv)
    size = resolve_size(args)

    # Initialize MPI
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()
    workers = comm.Get_size()

    # Every rank checks the same configuration, no message is sent on failure
    try:
        validate(workers, size, args.even_split, rank=rank)
    except TreeSortError as exc:
        if rank == 0:
            print(f"ERROR: {exc}", file=sys.stderr, flush=True)
        return 1

    if rank == 0:
        start_time = MPI.Wtime()

    transport = MPITransport(comm)
    try:
        sorted_data = run_worker(transport, size, get_sorter(args.sorter), args.verbose)
    except TreeSortError as exc:
        # Parents blocked on this rank would never return
        print(f"ERROR: {exc}", file=sys.stderr, flush=True)
        transport.abort(1)
        return 1

    if rank == 0:
        duration = MPI.Wtime() - start_time
        if args.debug:
            print(sorted_data.tolist())
        print(format_result(sorted_data))
        print(f"Time taken: {duration:.2f} seconds")
    return 0


if __name__ == '__main__':
    sys.exit(main())
